import io
import unittest
from unittest.mock import MagicMock, patch

from deepl_gateway.models import Translation
from deepl_gateway.services.deepl_client_service import DeepLClient
from deepl_gateway.services.translation_service import (
    create_glossary_from_text,
    list_glossaries,
    list_glossaries_raw,
    translate_texts,
)


class TestTranslationService(unittest.TestCase):

    def test_translate_texts_calls_client(self):
        mock_client = MagicMock(spec=DeepLClient)
        mock_client.translate.return_value = [Translation(detected_source_language="EN", text="Hallo")]

        result = translate_texts(("Hello",), "", "DE", client=mock_client)

        self.assertEqual(result[0].text, "Hallo")
        mock_client.translate.assert_called_once_with(["Hello"], "", "DE", "")

    def test_translate_empty_texts(self):
        with patch.object(DeepLClient, "from_settings") as from_settings:
            self.assertEqual(translate_texts([], "", "DE"), [])
        from_settings.assert_not_called()

    def test_settings_client_is_closed(self):
        with patch.object(DeepLClient, "from_settings") as from_settings:
            client = from_settings.return_value.__enter__.return_value
            client.list_glossaries.return_value = "{}"
            self.assertEqual(list_glossaries_raw(), "{}")
        from_settings.return_value.__exit__.assert_called_once()

    def test_list_glossaries(self):
        mock_client = MagicMock(spec=DeepLClient)
        mock_client.list_glossary_records.return_value = []
        self.assertEqual(list_glossaries(client=mock_client), [])
        mock_client.list_glossary_records.assert_called_once_with()

    def test_create_glossary_from_text(self):
        mock_client = MagicMock(spec=DeepLClient)
        create_glossary_from_text("g", "en", "de", "a\tb\r\n", client=mock_client)

        args, _ = mock_client.create_glossary.call_args
        self.assertEqual(args[:3], ("g", "en", "de"))
        self.assertIsInstance(args[3], io.StringIO)
        self.assertEqual(args[3].getvalue(), "a\tb\r\n")


if __name__ == "__main__":
    unittest.main()
