"""
Lab self-check scanner tests, run against the Flask app through a patched requests.
"""
from scanner.__main__ import main
from scanner.crawler import Crawler
from scanner.detectors.sqli import scan_sqli
from scanner.detectors.xss import scan_url_xss, scan_xss
from scanner.engine import ScannerEngine

BASE = "http://lab.test/"

LOGIN_FORM = {
    "url": BASE + "login",
    "action": BASE + "login",
    "method": "post",
    "inputs": [
        {"name": "username", "type": "text", "value": ""},
        {"name": "password", "type": "password", "value": ""},
    ],
}

SEARCH_FORM = {
    "url": BASE + "search",
    "action": BASE + "search",
    "method": "post",
    "inputs": [{"name": "searchTerm", "type": "text", "value": ""}],
}


def test_crawler_finds_forms_and_links(lab_http):
    crawler = Crawler(BASE)
    crawler.crawl(depth=2)
    targets = crawler.get_scan_targets()

    assert BASE + "profile?message=Hello" in targets["urls"]
    assert BASE + "admin?debug=false" in targets["urls"]
    actions = {form["action"]: form for form in targets["forms"]}
    assert set(actions) == {BASE + "login", BASE + "search"}
    assert [i["name"] for i in actions[BASE + "login"]["inputs"]] == ["username", "password"]


def test_sqli_detected_on_login(lab_http):
    findings = scan_sqli(LOGIN_FORM)
    assert len(findings) == 1
    assert findings[0]["type"] == "SQL Injection"
    assert findings[0]["technique"] == "error-based"


def test_sqli_detected_on_search(lab_http):
    findings = scan_sqli(SEARCH_FORM)
    assert len(findings) == 1
    assert findings[0]["url"] == BASE + "search"


def test_xss_detected_on_forms(lab_http):
    for form in (LOGIN_FORM, SEARCH_FORM):
        findings = scan_xss(form)
        assert [f["type"] for f in findings] == ["Reflected XSS"]


def test_url_xss_detected_on_profile(lab_http):
    findings = scan_url_xss(BASE + "profile?message=Hello")
    assert len(findings) == 1
    assert findings[0]["parameters"] == ["message"]


def test_url_without_query_is_skipped(lab_http):
    assert scan_url_xss(BASE + "login") == []


def test_engine_reports_every_lab_weakness(lab_http):
    engine = ScannerEngine(BASE)
    findings = engine.run_scan()

    found = {(f["type"], f["url"]) for f in findings}
    assert ("SQL Injection", BASE + "login") in found
    assert ("SQL Injection", BASE + "search") in found
    assert ("Reflected XSS", BASE + "login") in found
    assert ("Reflected XSS", BASE + "search") in found
    assert ("Reflected XSS (URL)", BASE + "profile?message=Hello") in found
    assert ("Reflected XSS (URL)", BASE + "admin?debug=false") in found
    assert engine.status == "Scan Complete"
    assert engine.is_running is False


def test_cli_prints_findings(lab_http, capsys):
    assert main([BASE, "--depth", "2"]) == 0
    out = capsys.readouterr().out
    assert "[CRITICAL] SQL Injection at http://lab.test/login" in out
