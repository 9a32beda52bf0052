"""HTTP client example: upload a raw PCM16LE 16kHz mono file"""
import requests
import sys

API_BASE = "http://localhost:8080"


def upload_pcm(file_path: str, uid: str = "example-client", sample_rate: int = 16000):
    """POST the file contents to /audio"""
    url = f"{API_BASE}/audio"

    with open(file_path, "rb") as f:
        payload = f.read()

    response = requests.post(
        url,
        params={"uid": uid, "sample_rate": sample_rate},
        data=payload,
        headers={"Content-Type": "application/octet-stream"},
    )

    if response.status_code == 200:
        print(response.text)
        return response.text
    else:
        print(f"Upload failed ({response.status_code}): {response.text}")
        return None


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python client_http.py <pcm file> [uid]")
        sys.exit(1)

    file_path = sys.argv[1]
    uid = sys.argv[2] if len(sys.argv) > 2 else "example-client"

    upload_pcm(file_path, uid)
