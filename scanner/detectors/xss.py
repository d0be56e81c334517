import requests
from urllib.parse import parse_qsl, urlsplit, urlunsplit

from scanner.detectors.common import build_form_data, submit_form

PAYLOADS = [
    "<script>alert('XSS')</script>",
    "<img src=x onerror=alert('XSS')>",
    "vulnerable<script>alert(1)</script>",
]
URL_PAYLOAD = "<script>alert(1)</script>"


def scan_xss(form, target_url=None):
    """
    Test for Reflected Cross-Site Scripting (XSS).
    """
    vulnerabilities = []
    action = form.get("action")

    for payload in PAYLOADS:
        try:
            response = submit_form(form, build_form_data(form, payload))
        except requests.RequestException as e:
            print(f"[!] XSS Test Error: {e}")
            continue

        # payload must come back UNESCAPED
        if payload in response.text:
            vulnerabilities.append({
                "type": "Reflected XSS",
                "severity": "HIGH",
                "url": action,
                "payload": payload,
                "description": f"Reflected XSS detected at {action}. The input submitted is rendered back to page without proper sanitization.",
                "evidence": "Payload found in response body"
            })
            return vulnerabilities

    return vulnerabilities


def scan_url_xss(url):
    """
    Test direct URL parameters for XSS. Every parameter gets the payload.
    """
    vulnerabilities = []
    parts = urlsplit(url)
    params = parse_qsl(parts.query, keep_blank_values=True)
    if not params:
        return vulnerabilities

    base_url = urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))
    test_params = {key: URL_PAYLOAD for key, _ in params}

    try:
        response = requests.get(base_url, params=test_params, timeout=5)
    except requests.RequestException as e:
        print(f"[!] XSS Test Error: {e}")
        return vulnerabilities

    if URL_PAYLOAD in response.text:
        vulnerabilities.append({
            "type": "Reflected XSS (URL)",
            "severity": "HIGH",
            "url": url,
            "payload": URL_PAYLOAD,
            "parameters": sorted(test_params),
            "description": "Reflected XSS detected in URL parameters.",
            "evidence": "Payload found in response body"
        })

    return vulnerabilities
