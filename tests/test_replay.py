"""
Tests for the replay loader and report formatter.
"""

import json
from pathlib import Path

import pytest

from compoundwatch.annotations import MemoryStorage
from compoundwatch.engine import MonitorEngine
from compoundwatch.replay import format_report, load_cycles, run_replay

SAMPLE = Path(__file__).resolve().parent.parent / "replay" / "sample_cycles.jsonl"


class TestLoader:
    def test_sample_file(self):
        cycles = load_cycles(SAMPLE)
        assert len(cycles) == 3
        assert cycles[0].items[0].source == "Reuters"
        assert cycles[2].locale == "pt-BR"

    def test_json_array(self, tmp_path):
        path = tmp_path / "cycles.json"
        path.write_text(json.dumps([
            {"items": [{"text": "tariff news"}]},
            [{"text": "bare list cycle", "source": "AP"}],
        ]))
        cycles = load_cycles(path)
        assert [len(c.items) for c in cycles] == [1, 1]
        assert cycles[1].items[0].source == "AP"

    def test_blank_lines_ignored(self, tmp_path):
        path = tmp_path / "cycles.jsonl"
        path.write_text('{"items": []}\n\n{"items": []}\n')
        assert len(load_cycles(path)) == 2

    def test_missing_text_rejected(self, tmp_path):
        path = tmp_path / "cycles.jsonl"
        path.write_text('{"items": [{"source": "AP"}]}\n')
        with pytest.raises(ValueError, match="line 1, item 0"):
            load_cycles(path)


class TestRun:
    def test_sample_replay(self):
        engine = MonitorEngine(storage=MemoryStorage())
        reports = run_replay(load_cycles(SAMPLE), engine)
        assert [r.cycle for r in reports] == [1, 2, 3]
        assert "trade-war-escalation" in [p.pattern_id for p in reports[1].patterns]
        assert reports[2].locale == "pt-BR"

    def test_text_report(self):
        engine = MonitorEngine(storage=MemoryStorage())
        reports = run_replay(load_cycles(SAMPLE), engine, locale="en")
        text = format_report(reports, engine)
        assert "COMPOUNDWATCH REPLAY REPORT" in text
        assert "Trade War Escalation" in text
