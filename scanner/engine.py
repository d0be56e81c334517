from scanner.crawler import Crawler
from scanner.detectors.sqli import scan_sqli
from scanner.detectors.xss import scan_xss, scan_url_xss


class ScannerEngine:
    def __init__(self, target_url, depth=2):
        self.target_url = target_url
        self.depth = depth
        self.vulnerabilities = []
        self.status = "Idle"
        self.progress = 0
        self.is_running = False

    def run_scan(self):
        self.is_running = True
        self.vulnerabilities = []

        try:
            # Phase 1: Crawling
            self.status = "Crawling target site..."
            self.progress = 10
            crawler = Crawler(self.target_url)
            crawler.crawl(depth=self.depth)
            targets = crawler.get_scan_targets()
            print(f"[+] Found {len(targets['urls'])} page(s) and {len(targets['forms'])} form(s)")

            # Phase 2: Vulnerability Testing
            self.status = "Testing for Cross-Site Scripting (XSS)..."
            self.progress = 40
            for form in targets["forms"]:
                self.vulnerabilities.extend(scan_xss(form, self.target_url))

            for url in targets["urls"]:
                self.vulnerabilities.extend(scan_url_xss(url))

            self.status = "Testing for SQL Injection (SQLi)..."
            self.progress = 70
            for form in targets["forms"]:
                self.vulnerabilities.extend(scan_sqli(form, self.target_url))

            self.status = "Scan Complete"
            self.progress = 100
        finally:
            self.is_running = False

        return self.vulnerabilities
