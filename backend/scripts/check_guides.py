"""Comprobación rápida de un backend en ejecución (solo para pruebas locales).

Lista la primera página de guías, pide la primera por slug y verifica que un
slug inexistente devuelva 404.

Uso:
    BACKEND_BASE=http://localhost:8000/api python scripts/check_guides.py [search]
"""
from __future__ import annotations
import os
import sys
import requests
from pathlib import Path
from dotenv import load_dotenv

# Cargar .env (busca en el directorio backend)
env_path = Path(__file__).resolve().parent.parent / '.env'
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

BACKEND_BASE = os.environ.get("BACKEND_BASE", "http://localhost:8000/api").rstrip('/')
ADMIN_TOKEN = os.environ.get("ADMIN_TOKEN")
search = sys.argv[1] if len(sys.argv) > 1 else None

headers = {"X-Admin-Token": ADMIN_TOKEN} if ADMIN_TOKEN else {}
print("[+] Inicializando almacén...")
resp = requests.post(f"{BACKEND_BASE}/db/init", headers=headers, timeout=10)
print("    ", resp.status_code, resp.json())
if resp.status_code != 200:
    sys.exit(1)

params = {"limit": 5}
if search:
    params["search"] = search
resp = requests.get(f"{BACKEND_BASE}/guides", params=params, timeout=10)
resp.raise_for_status()
page = resp.json()
print(f"[+] {page['pagination']['total']} guías (hasMore={page['pagination']['hasMore']})")
for g in page['guides']:
    print(f"    - {g['slug']:<24} {g['difficulty']:<13} {g['category']:<15} tags={g['tags']}")

if page['guides']:
    slug = page['guides'][0]['slug']
    resp = requests.get(f"{BACKEND_BASE}/guides/{slug}", timeout=10)
    print(f"[+] GET /guides/{slug} ->", resp.status_code)

resp = requests.get(f"{BACKEND_BASE}/guides/this-slug-does-not-exist", timeout=10)
print("[+] Slug inexistente ->", resp.status_code, resp.json())
if resp.status_code != 404:
    sys.exit(1)
