import os, requests
from dotenv import load_dotenv
load_dotenv()
API = os.getenv("API_BASE_URL", "http://localhost:8000")
S = requests.Session(); S.headers.update({"Accept": "application/json"})

def healthz():   r=S.get(f"{API}/healthz",timeout=10); r.raise_for_status(); return r.json()

def search(name: str):
    """
    Look up one country. Returns the record dict.
    Non-200 answers are plain text; raise them with the server's message.
    """
    r = S.get(f"{API}/api/countries/search", params={"name": name}, timeout=15)
    if r.status_code != 200:
        raise RuntimeError(f"{r.status_code}: {r.text}")
    return r.json()
