"""
Tests for scripts/generate.py: exit codes, stderr message, JSON and text output.
"""
import importlib.util
import io
import json
import sys
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from blueprint.api_client import APIError
from blueprint.stages import STAGE_TITLES


def _load_generate_script():
    spec = importlib.util.spec_from_file_location("generate_script", ROOT / "scripts" / "generate.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


generate_script = _load_generate_script()


def _run(*args: str) -> tuple[int, str, str]:
    """Run main() with sys.argv patched; return (exit code, stdout, stderr)."""
    out, err = io.StringIO(), io.StringIO()
    with mock.patch.object(sys, "argv", ["generate.py", *args]), redirect_stdout(out), redirect_stderr(err):
        code = generate_script.main()
    return code, out.getvalue(), err.getvalue()


class TestGenerateScript(unittest.TestCase):
    def test_short_description_exits_2(self):
        code, out, err = _run("tiny")
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertIn("please add more detail", err)
        self.assertIn("कृपया अधिक तपशील द्या", err)

    def test_json_output(self):
        code, out, err = _run("A rainy night chase, drone shot, tense mood")
        self.assertEqual(code, 0)
        plan = json.loads(out)
        self.assertTrue(plan["sceneSynopsis"].startswith("Cinematic brief:"))
        self.assertEqual(plan["traits"]["mood"], "tense")
        self.assertEqual(plan["renderSettings"]["samples"], "Path Tracer Samples: 6,144 per pixel")

    def test_text_output(self):
        code, out, _ = _run("A battle in Krakow, at dawn", "--format", "text")
        self.assertEqual(code, 0)
        for title in STAGE_TITLES:
            self.assertIn(title, out)
        self.assertIn("Cinematic brief: Krakow", out)
        self.assertIn("Master Export:", out)

    def test_sample_flag(self):
        code, out, _ = _run("--sample")
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)["traits"]["location"], "Mumbai at midnight")

    def test_missing_description_is_usage_error(self):
        err = io.StringIO()
        with mock.patch.object(sys, "argv", ["generate.py"]), redirect_stderr(err):
            with self.assertRaises(SystemExit) as ctx:
                generate_script.main()
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("--sample", err.getvalue())

    @mock.patch("blueprint.api_client.request_plan")
    def test_remote_validation_error_exits_2(self, mock_request_plan):
        mock_request_plan.side_effect = APIError("please add more detail.", status_code=422, path="/api/plan")
        code, out, err = _run("tiny", "--remote", "--api-base", "http://svc")
        self.assertEqual(code, 2)
        self.assertIn("please add more detail", err)
        mock_request_plan.assert_called_once_with("http://svc", "tiny")

    @mock.patch("blueprint.api_client.request_plan")
    def test_remote_json_output(self, mock_request_plan):
        mock_request_plan.return_value = {"sceneSynopsis": "Cinematic brief: x"}
        code, out, _ = _run("A battle in Krakow, at dawn", "--remote", "--api-base", "http://svc")
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out), {"sceneSynopsis": "Cinematic brief: x"})


if __name__ == "__main__":
    unittest.main()
