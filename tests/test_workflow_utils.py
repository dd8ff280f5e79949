"""
Unit tests for structured logging and shutdown flag.
"""
import json
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from blueprint import workflow_utils


class TestWorkflowUtils(unittest.TestCase):
    def test_log_structured_levels(self):
        with self.assertLogs("blueprint.workflow_utils", level="INFO") as logs:
            workflow_utils.log_structured("info", event="plan_generated", mood="tense")
            workflow_utils.log_structured("warning", event="plan_rejected", chars=4)
        self.assertEqual([r.levelname for r in logs.records], ["INFO", "WARNING"])
        record = json.loads(logs.records[0].getMessage())
        self.assertEqual(record, {"level": "info", "event": "plan_generated", "mood": "tense"})

    def test_log_structured_keeps_marathi(self):
        with self.assertLogs("blueprint.workflow_utils", level="ERROR") as logs:
            workflow_utils.log_structured("error", message="पुन्हा प्रयत्न करा")
        self.assertIn("पुन्हा", logs.records[0].getMessage())

    def test_shutdown_flag(self):
        original = workflow_utils._shutdown_requested
        try:
            workflow_utils._shutdown_requested = False
            self.assertFalse(workflow_utils.request_shutdown())
            workflow_utils._set_shutdown_requested()
            self.assertTrue(workflow_utils.request_shutdown())
        finally:
            workflow_utils._shutdown_requested = original


if __name__ == "__main__":
    unittest.main()
