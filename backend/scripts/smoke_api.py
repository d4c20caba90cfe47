#!/usr/bin/env python3
"""Manual smoke check against a running recap API (python -m recap_api.main)."""
import sys

import requests  # type: ignore[import-untyped]

BASE_URL = "http://localhost:3001/api"


def check_health():
    """Check the health endpoint."""
    print("Checking health endpoint...")
    response = requests.get(f"{BASE_URL}/health", timeout=5)
    print(f"Status: {response.status_code}")
    print(f"Response: {response.json()}")
    print()


def check_summary(video_id: str, language: str, length: str) -> bool:
    """Fetch a transcript and summarize it end to end."""
    print(f"Summarizing {video_id} ({language}, {length})")
    print("=" * 80)

    try:
        response = requests.get(f"{BASE_URL}/transcript/{video_id}", timeout=60)
        body = response.json()
        if not body.get("success"):
            print(f"❌ Transcript failed: {body.get('error')}")
            return False
        transcript = body["transcript"]
        print(f"Fetched {len(transcript)} segments")

        response = requests.post(
            f"{BASE_URL}/summarize",
            json={"transcript": transcript, "language": language, "length": length},
            timeout=300,
        )
        body = response.json()
    except requests.exceptions.RequestException as e:
        print(f"\n❌ Request failed: {e}")
        return False

    if not body.get("success"):
        print(f"❌ Summary failed: {body.get('error')}")
        return False

    print(body["summary"])
    concept_map = body.get("conceptMap") or {}
    nodes = concept_map.get("nodes", []) if isinstance(concept_map, dict) else []
    print(f"\n✅ Concept map with {len(nodes)} node(s)")
    return True


if __name__ == "__main__":
    print("recap API Smoke Check")
    print("=" * 80)
    print()

    try:
        check_health()
    except Exception as e:
        print(f"❌ Health check failed: {e}")
        print("Make sure the API server is running:")
        print("  cd backend")
        print("  python -m recap_api.main")
        sys.exit(1)

    video_id = sys.argv[1] if len(sys.argv) > 1 else "dQw4w9WgXcQ"
    language = sys.argv[2] if len(sys.argv) > 2 else "english"
    length = sys.argv[3] if len(sys.argv) > 3 else "medium"

    success = check_summary(video_id, language, length)
    sys.exit(0 if success else 1)
