import argparse
import json
import sys

from scanner.engine import ScannerEngine


def main(argv=None):
    ap = argparse.ArgumentParser(description="Confirm that a running lab instance is still exploitable")
    ap.add_argument("base_url", help="Lab base URL, e.g. http://127.0.0.1:8080/")
    ap.add_argument("--depth", type=int, default=2, help="Link depth to crawl (default: 2)")
    ap.add_argument("--json", action="store_true", help="Print findings as JSON")
    args = ap.parse_args(argv)

    engine = ScannerEngine(args.base_url, depth=args.depth)
    findings = engine.run_scan()

    if args.json:
        print(json.dumps(findings, indent=2))
    else:
        print("\n" + "="*60)
        print(f"Findings for {args.base_url}: {len(findings)}")
        print("="*60)
        for item in findings:
            print(f"[{item['severity']}] {item['type']} at {item['url']}")
            print(f"    payload:  {item['payload']}")
            print(f"    evidence: {item['evidence']}")

    return 0 if findings else 1


if __name__ == "__main__":
    sys.exit(main())
