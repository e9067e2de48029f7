"""Start a generation job on a running server and print the SSE stream.

Usage:
  python scripts/stream_demo.py "The Green Cafe" "Organic Restaurant" [--base-url http://localhost:3001]
"""

import argparse
import json

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("business_name")
    parser.add_argument("business_type")
    parser.add_argument("--base-url", default="http://localhost:3001")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url, timeout=None) as client:
        r = client.post(
            "/api/start-generation",
            json={"businessName": args.business_name, "businessType": args.business_type},
        )
        r.raise_for_status()
        job_id = r.json()["jobId"]
        print(f"Job {job_id}")

        event = None
        with client.stream("GET", f"/api/generation-stream/{job_id}") as stream:
            for line in stream.iter_lines():
                if line.startswith("event: "):
                    event = line[len("event: "):]
                elif line.startswith("data: "):
                    data = json.loads(line[len("data: "):])
                    if event is None:
                        print(f"[{data['index']}] {data['design']['style']}: {len(data['html'])} chars")
                    else:
                        print(f"{event}: {data}")
                elif not line:
                    event = None


if __name__ == "__main__":
    main()
