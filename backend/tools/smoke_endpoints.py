import argparse
import concurrent.futures
import json
import os

import requests

BASE = os.environ.get("VURAL_BASE", "http://127.0.0.1:8000/api")

PUBLIC = [
    "/health",
    "/products",
    "/categories",
    "/content",
    "/projects",
    "/jobs",
    "/blog",
    "/solar-packages",
    "/solar-packages/recommend/1000",
    "/calculator/cities",
    "/calculator/estimate?bill=1500&city=%C4%B0stanbul",
]

ADMIN = [
    "/customers",
    "/quotes",
    "/messages",
    "/applications",
    "/media",
    "/settings",
    "/admin/dashboard",
    "/storage/vural_products",
]


def login(email, password):
    r = requests.post(f"{BASE}/auth/login", json={"email": email, "password": password}, timeout=10)
    r.raise_for_status()
    return {"Authorization": f"Bearer {r.json()['token']}"}


def get_task(path, headers=None):
    try:
        r = requests.get(f"{BASE}{path}", headers=headers, timeout=10)
        size = len(r.content)
        return (path, r.status_code, size)
    except requests.RequestException as e:
        return (path, "ERR", str(e))


def run(paths, headers=None, workers=4):
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as ex:
        futures = [ex.submit(get_task, p, headers) for p in paths]
        results = [f.result() for f in futures]
    for r in results:
        print(r)
    return results


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Hit every read endpoint of a running server.")
    parser.add_argument("--email", default=os.environ.get("ADMIN_EMAIL", "admin@vuralenerji.com"))
    parser.add_argument("--password", default=os.environ.get("ADMIN_PASSWORD"))
    parser.add_argument("--workers", type=int, default=4)
    args = parser.parse_args()

    print(f"Public endpoints on {BASE}")
    results = run(PUBLIC, workers=args.workers)

    if args.password:
        print("\nAdmin endpoints")
        results += run(ADMIN, headers=login(args.email, args.password), workers=args.workers)
    else:
        print("\nSkipping admin endpoints (pass --password)")

    failed = [r for r in results if r[1] != 200]
    print("\nFailures:", json.dumps([r[0] for r in failed]))
