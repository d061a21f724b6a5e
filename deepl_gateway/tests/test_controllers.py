import unittest
from unittest.mock import patch

from fastapi import HTTPException

from deepl_gateway.config import Settings
from deepl_gateway.controllers.config_controller import force_reload
from deepl_gateway.controllers.glossary_controller import create_glossary, get_glossaries, get_glossaries_raw
from deepl_gateway.controllers.health_controller import health
from deepl_gateway.controllers.translate_controller import translate
from deepl_gateway.models import Glossary, GlossaryCreateRequest, TranslateRequest, Translation
from deepl_gateway.services.errors import ApiError, ConfigError, DecodingError, EntriesReadError, TransportError

GLOSSARY = Glossary(
    id="gid",
    name="g",
    ready=False,
    source_lang="en",
    target_lang="de",
    creation_time="2024-01-01T00:00:00Z",
    entry_count=1,
)


class TestTranslateController(unittest.TestCase):
    @patch("deepl_gateway.controllers.translate_controller.translate_texts")
    def test_translate_controller(self, mock_translate):
        mock_translate.return_value = [Translation(detected_source_language="EN", text="Hallo")]
        req = TranslateRequest(texts=["Hello"], target_lang="DE")

        resp = translate(req)

        self.assertEqual(
            resp,
            {"status": "success", "translations": [{"detected_source_language": "EN", "text": "Hallo"}]},
        )
        mock_translate.assert_called_with(["Hello"], "", "DE", glossary_id="")

    @patch("deepl_gateway.controllers.translate_controller.translate_texts")
    def test_upstream_status_propagated(self, mock_translate):
        mock_translate.side_effect = ApiError(456, "Quota exceeded")
        with self.assertRaises(HTTPException) as ctx:
            translate(TranslateRequest(texts=["Hello"], target_lang="DE"))
        self.assertEqual(ctx.exception.status_code, 456)
        self.assertEqual(ctx.exception.detail["code"], 456)

    @patch("deepl_gateway.controllers.translate_controller.translate_texts")
    def test_transport_error_is_bad_gateway(self, mock_translate):
        mock_translate.side_effect = TransportError("connection refused")
        with self.assertRaises(HTTPException) as ctx:
            translate(TranslateRequest(texts=["Hello"], target_lang="DE"))
        self.assertEqual(ctx.exception.status_code, 502)

    @patch("deepl_gateway.controllers.translate_controller.translate_texts")
    def test_missing_config(self, mock_translate):
        mock_translate.side_effect = ConfigError("Missing API key")
        with self.assertRaises(HTTPException) as ctx:
            translate(TranslateRequest(texts=["Hello"], target_lang="DE"))
        self.assertEqual(ctx.exception.status_code, 500)


class TestGlossaryController(unittest.TestCase):
    @patch("deepl_gateway.controllers.glossary_controller.list_glossaries")
    def test_get_glossaries(self, mock_list):
        mock_list.return_value = [GLOSSARY]
        resp = get_glossaries()
        self.assertEqual(resp["status"], "success")
        self.assertEqual(resp["glossaries"][0]["glossary_id"], "gid")

    @patch("deepl_gateway.controllers.glossary_controller.list_glossaries_raw")
    def test_get_glossaries_raw(self, mock_raw):
        mock_raw.return_value = '{"glossaries":[]}'
        self.assertEqual(get_glossaries_raw(), {"status": "success", "body": '{"glossaries":[]}'})

    @patch("deepl_gateway.controllers.glossary_controller.list_glossaries")
    def test_get_glossaries_decoding_error(self, mock_list):
        mock_list.side_effect = DecodingError("bad body")
        with self.assertRaises(HTTPException) as ctx:
            get_glossaries()
        self.assertEqual(ctx.exception.status_code, 502)

    @patch("deepl_gateway.controllers.glossary_controller.create_glossary_from_text")
    def test_create_glossary(self, mock_create):
        mock_create.return_value = GLOSSARY
        req = GlossaryCreateRequest(name="g", source_lang="en", target_lang="de", entries="a\tb\n")
        resp = create_glossary(req)
        self.assertEqual(resp["glossary"]["name"], "g")
        mock_create.assert_called_once_with("g", "en", "de", "a\tb\n")

    @patch("deepl_gateway.controllers.glossary_controller.create_glossary_from_text")
    def test_create_glossary_entries_error(self, mock_create):
        mock_create.side_effect = EntriesReadError("Glossary entries exceed 10 bytes")
        req = GlossaryCreateRequest(name="g", source_lang="en", target_lang="de", entries="a\tb\n")
        with self.assertRaises(HTTPException) as ctx:
            create_glossary(req)
        self.assertEqual(ctx.exception.status_code, 400)


class TestHealthController(unittest.TestCase):
    @patch("deepl_gateway.config.load_settings")
    def test_degraded_without_key(self, mock_load):
        mock_load.return_value = Settings(raw={"deepl": {"base_url": "https://api-free.deepl.com/v2"}})
        with patch.dict("os.environ", {}, clear=True):
            resp = health()
        self.assertEqual(resp["status"], "degraded")
        self.assertFalse(resp["checks"]["api_key"])
        self.assertTrue(resp["checks"]["base_url"])

    @patch("deepl_gateway.config.load_settings")
    def test_ok(self, mock_load):
        mock_load.return_value = Settings(raw={"api_keys": {"deepl": "k"}})
        with patch.dict("os.environ", {}, clear=True):
            resp = health()
        self.assertEqual(resp["status"], "ok")


class TestConfigController(unittest.TestCase):
    @patch("deepl_gateway.controllers.config_controller.reload_settings")
    def test_force_reload(self, mock_reload):
        mock_reload.return_value = Settings(raw={"deepl": {"base_url": "http://deepl.local/v2"}})
        with patch.dict("os.environ", {}, clear=True):
            resp = force_reload()
        mock_reload.assert_called_once_with()
        self.assertEqual(resp, {"status": "ok", "base_url": "http://deepl.local/v2", "api_key_configured": False})


if __name__ == "__main__":
    unittest.main()
