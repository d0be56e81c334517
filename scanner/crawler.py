import requests
from bs4 import BeautifulSoup
from urllib.parse import urljoin, urlparse


class Crawler:
    """Walks same-host links of the lab and records every form it finds."""

    def __init__(self, base_url, timeout=5):
        self.base_url = base_url
        self.timeout = timeout
        self.visited_urls = set()
        self.forms = []

    def _extract_forms(self, url, soup):
        for form in soup.find_all('form'):
            post_url = urljoin(url, form.get('action') or url)
            method = form.get('method', 'get').lower()

            inputs = []
            for input_tag in form.find_all(['input', 'textarea', 'select']):
                input_name = input_tag.get('name')
                input_type = input_tag.get('type', 'text')
                input_value = input_tag.get('value', '')
                if input_name:
                    inputs.append({"name": input_name, "type": input_type, "value": input_value})

            key = (post_url, method)
            if key not in {(f["action"], f["method"]) for f in self.forms}:
                self.forms.append({
                    "url": url,
                    "action": post_url,
                    "method": method,
                    "inputs": inputs
                })

    def crawl(self, url=None, depth=2):
        if url is None:
            url = self.base_url

        if depth == 0 or url in self.visited_urls:
            return

        print(f"[*] Crawling: {url}")
        self.visited_urls.add(url)

        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            print(f"[!] Crawling error at {url}: {e}")
            return

        soup = BeautifulSoup(response.text, 'html.parser')
        self._extract_forms(url, soup)

        for link in soup.find_all('a', href=True):
            link_url = urljoin(url, link.get('href'))

            # stay on the lab host
            if urlparse(link_url).netloc == urlparse(self.base_url).netloc:
                self.crawl(link_url, depth - 1)

    def get_scan_targets(self):
        return {
            "urls": sorted(self.visited_urls),
            "forms": self.forms
        }
