import requests

from scanner.detectors.common import build_form_data, submit_form

ERROR_PAYLOADS = ["'", "''", "' OR 1=1--", '" OR 1=1--', "admin' --"]

# (always-true, always-false) pairs for boolean based detection
BOOLEAN_PAYLOADS = [
    ("' OR '1'='1", "' AND '1'='2"),
    ("' OR 1=1 --", "' AND 1=2 --"),
]

ERROR_INDICATORS = [
    "sqlite3.OperationalError",
    "OperationalError",
    "SQL syntax",
    "syntax error",
    "unrecognized token",
    "PostgreSQL query failed",
    "Database error:",
    "Search error:",
    "Welcome back,",
]

# minimum extra bytes an always-true answer must carry over the always-false one
BOOLEAN_DIFF_THRESHOLD = 50


def _finding(form, payload, evidence, technique):
    action = form.get("action")
    return {
        "type": "SQL Injection",
        "severity": "CRITICAL",
        "url": action,
        "payload": payload,
        "technique": technique,
        "description": f"Potential SQL Injection detected via form at {action} using payload {payload}.",
        "evidence": evidence
    }


def scan_sqli(form, target_url=None):
    """
    Test a form for error based and boolean based SQL Injection.
    Stops at the first confirmed finding for the form.
    """
    vulnerabilities = []

    for payload in ERROR_PAYLOADS:
        try:
            response = submit_form(form, build_form_data(form, payload))
        except requests.RequestException as e:
            print(f"[!] SQLi Test Error: {e}")
            continue

        for indicator in ERROR_INDICATORS:
            if indicator in response.text:
                vulnerabilities.append(_finding(form, payload, indicator, "error-based"))
                return vulnerabilities

    for true_payload, false_payload in BOOLEAN_PAYLOADS:
        try:
            true_response = submit_form(form, build_form_data(form, true_payload))
            false_response = submit_form(form, build_form_data(form, false_payload))
        except requests.RequestException as e:
            print(f"[!] SQLi Test Error: {e}")
            continue

        diff = len(true_response.text) - len(false_response.text)
        if diff >= BOOLEAN_DIFF_THRESHOLD:
            evidence = f"Always-true answer is {diff} bytes longer than always-false answer"
            vulnerabilities.append(_finding(form, true_payload, evidence, "boolean-based"))
            return vulnerabilities

    return vulnerabilities
