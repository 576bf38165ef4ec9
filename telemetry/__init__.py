"""JSONL telemetry for rover command runs."""
