import argparse
import io
import json
import logging
import sys

from deepl_gateway.config import load_settings
from deepl_gateway.services import DeepLClient, DeepLClientError
from deepl_gateway.utils import parse_entries, read_entries


def _cmd_translate(client: DeepLClient, args) -> dict:
    translations = client.translate(args.text, args.source, args.target, args.glossary)
    return {"translations": [t.model_dump() for t in translations]}


def _cmd_list_glossaries(client: DeepLClient, args) -> dict:
    if args.raw:
        return {"body": client.list_glossaries()}
    return {"glossaries": [g.to_wire() for g in client.list_glossary_records()]}


def _cmd_create_glossary(client: DeepLClient, args) -> dict:
    with open(args.entries, "r", encoding="utf-8", newline="") as f:
        content = read_entries(f, args.max_entries_bytes)
    # fail fast on malformed lines before anything is sent
    pairs = parse_entries(content)
    glossary = client.create_glossary(args.name, args.source, args.target, io.StringIO(content))
    return {"local_entry_count": len(pairs), "glossary": glossary.to_wire()}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="deepl-cli")
    parser.add_argument("--base-url", default=None)
    parser.add_argument("--api-key", default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    p_tr = sub.add_parser("translate")
    p_tr.add_argument("--text", action="append", required=True)
    p_tr.add_argument("--target", required=True)
    p_tr.add_argument("--source", default="")
    p_tr.add_argument("--glossary", default="")
    p_tr.set_defaults(func=_cmd_translate)

    p_ls = sub.add_parser("list-glossaries")
    p_ls.add_argument("--raw", action="store_true")
    p_ls.set_defaults(func=_cmd_list_glossaries)

    p_cg = sub.add_parser("create-glossary")
    p_cg.add_argument("--name", required=True)
    p_cg.add_argument("--source", required=True)
    p_cg.add_argument("--target", required=True)
    p_cg.add_argument("--entries", required=True)
    p_cg.set_defaults(func=_cmd_create_glossary)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    settings = load_settings()
    base_url = args.base_url or settings.base_url
    api_key = args.api_key or settings.resolve_deepl_key() or ""
    args.max_entries_bytes = settings.max_entries_bytes

    try:
        with DeepLClient(
            base_url,
            api_key,
            timeout=settings.timeout,
            max_entries_bytes=settings.max_entries_bytes,
        ) as client:
            result = args.func(client, args)
    except (DeepLClientError, OSError, ValueError) as e:
        sys.stderr.write(json.dumps({"status": "error", "message": str(e)}, ensure_ascii=False))
        sys.stderr.write("\n")
        return 1

    result["status"] = "success"
    sys.stdout.write(json.dumps(result, ensure_ascii=False, indent=2))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
