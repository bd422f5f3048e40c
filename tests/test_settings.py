from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
import unittest
from unittest import mock

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parent.parent
API_CODE_PATH = PROJECT_ROOT / "api-code"
if str(API_CODE_PATH) not in sys.path:
    sys.path.insert(0, str(API_CODE_PATH))

from env_loader import load_local_env
from settings import Settings


class SettingsTest(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = Settings.model_validate({})

        self.assertEqual(settings.port, 3004)
        self.assertEqual(settings.gateway_url, "http://101.47.159.98:18789")
        self.assertEqual(settings.gateway_timeout_seconds, 30.0)
        self.assertEqual(settings.gateway_chat_url, "http://101.47.159.98:18789/api/chat")

    def test_from_env_reads_aliases(self) -> None:
        env = {"PORT": "8080", "GATEWAY_URL": "http://upstream:9000/", "GATEWAY_TIMEOUT_SECONDS": "2.5"}
        with mock.patch.dict(os.environ, env):
            settings = Settings.from_env()

        self.assertEqual(settings.port, 8080)
        self.assertEqual(settings.gateway_timeout_seconds, 2.5)
        self.assertEqual(settings.gateway_chat_url, "http://upstream:9000/api/chat")

    def test_invalid_port_is_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            Settings.model_validate({"PORT": "not-a-port"})

    def test_settings_are_immutable(self) -> None:
        settings = Settings.model_validate({})
        with self.assertRaises(ValidationError):
            settings.gateway_url = "http://elsewhere"  # type: ignore[misc]


class LoadLocalEnvTest(unittest.TestCase):
    def test_loads_pairs_and_skips_malformed_lines(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            env_file = Path(tmp) / ".env"
            env_file.write_text(
                "# comment\n"
                "GATEWAY_URL='http://from-dotenv:1234'\n"
                "export PORT=4000\n"
                "garbage line\n",
                encoding="utf-8",
            )
            with mock.patch.dict(os.environ, {}, clear=True):
                with self.assertLogs("voice-relay.env", level="WARNING") as captured:
                    load_local_env(env_file)
                loaded = dict(os.environ)

        self.assertEqual(loaded["GATEWAY_URL"], "http://from-dotenv:1234")
        self.assertEqual(loaded["PORT"], "4000")
        self.assertIn("garbage line", captured.output[0])

    def test_file_values_replace_environment_and_blank_keys_are_skipped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            env_file = Path(tmp) / ".env"
            env_file.write_text("PORT=4000\n=orphan\n", encoding="utf-8")
            with mock.patch.dict(os.environ, {"PORT": "5000"}, clear=True):
                with self.assertLogs("voice-relay.env", level="WARNING") as captured:
                    load_local_env(env_file)
                self.assertEqual(dict(os.environ), {"PORT": "4000"})

        self.assertIn("without a key", captured.output[0])

    def test_missing_file_is_ignored(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            load_local_env(Path("/nonexistent/.env"))
            self.assertEqual(dict(os.environ), {})


if __name__ == "__main__":
    unittest.main()
