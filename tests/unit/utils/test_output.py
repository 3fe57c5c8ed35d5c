"""Tests for printing Jira responses."""

import json

from jico.exceptions import JiraApiError
from jico.utils.output import format_json, print_api_error, print_json


def test_format_json_keeps_key_order_and_unicode():
    text = format_json({"key": "ACME-1", "fields": {"summary": "Überprüfung"}})

    assert text.index('"key"') < text.index('"fields"')
    assert "Überprüfung" in text
    assert text.startswith("{\n  ")


def test_print_json(capsys):
    print_json([{"key": "ACME-2"}])

    assert json.loads(capsys.readouterr().out) == [{"key": "ACME-2"}]


def test_print_api_error(capsys):
    body = {"errorMessages": ["Issue does not exist"], "errors": {}}

    print_api_error(JiraApiError("Jira returned error status 404 Not Found", 404, body))

    captured = capsys.readouterr()
    assert captured.err.strip() == "Error: Jira returned error status 404 Not Found"
    assert json.loads(captured.out) == body


def test_print_api_error_without_body(capsys):
    print_api_error(JiraApiError("Jira returned error status 500", 500))

    captured = capsys.readouterr()
    assert "500" in captured.err
    assert captured.out == ""
