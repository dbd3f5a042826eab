"""Tests for the command line entry point."""

import io
import json

import pytest

from trip_extractor.__main__ import main
from trip_extractor.io.input_text import get_input_text


def test_prints_fields_as_json(capsys):
    code = main(["--today", "2026-03-01", "party of 4, budget is $2000 per person, prefer a hotel"])

    assert code == 0
    output = json.loads(capsys.readouterr().out)
    assert output == {"travelers": 4, "budget": "2000", "accommodation": "hotel"}


def test_words_are_joined(capsys):
    main(["--today", "2026-03-01", "I'm", "going", "to", "Tokyo", "from", "July", "10th", "to", "July", "18th"])

    output = json.loads(capsys.readouterr().out)
    assert output["destination"] == "Tokyo"
    assert output["startDate"] == "2026-07-10"
    assert output["endDate"] == "2026-07-18"


def test_start_date_seeds_the_context(capsys):
    main(["--today", "2026-03-01", "--start-date", "2026-07-10", "going to Rome for 7 days"])

    output = json.loads(capsys.readouterr().out)
    assert output["endDate"] == "2026-07-16"
    assert output["specialRequests"] == "going to Rome for 7 days"
    assert "startDate" not in output


def test_verbose_output(capsys):
    main(["-v", "--today", "2026-03-01", "I'm going to Tokyo with my grandmother"])

    output = json.loads(capsys.readouterr().out)
    assert output["fields"]["destination"] == "Tokyo"
    assert output["tokens"][0]["field"] == "destination"
    assert output["diagnostics"]["accepted"] >= 1
    assert output["unparsedWords"] == ["grandmother"]


def test_invalid_date_is_rejected(capsys):
    with pytest.raises(SystemExit):
        main(["--today", "March 1st", "going to Rome"])


def test_input_text_from_stream():
    assert get_input_text([], io.StringIO("going to Rome\n")) == "going to Rome"
    assert get_input_text(["going", "to", "Rome"], io.StringIO("ignored")) == "going to Rome"


def test_transcript_length_setting_applies(monkeypatch, capsys):
    monkeypatch.setenv("TRIP_PARSER_MAX_TRANSCRIPT_LENGTH", "10")

    main(["--today", "2026-03-01", "party of 4, prefer a hotel"])

    output = json.loads(capsys.readouterr().out)
    assert output == {"travelers": 4}


def test_debug_diagnostics_setting_logs_rejections(monkeypatch, capsys):
    monkeypatch.setenv("TRIP_PARSER_DEBUG_DIAGNOSTICS", "true")

    main(["--today", "2026-03-01", "party of 4, budget is $5000, prefer a hotel"])

    captured = capsys.readouterr()
    output = json.loads(captured.out)
    assert output["travelers"] == 4
    assert "budget" not in output
    assert "Parse diagnostic: low_confidence" in captured.err
