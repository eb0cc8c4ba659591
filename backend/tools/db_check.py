import json
import sqlite3
import sys

DB = sys.argv[1] if len(sys.argv) > 1 else "vural.db"
SKU = sys.argv[2] if len(sys.argv) > 2 else None

conn = sqlite3.connect(DB)
cur = conn.cursor()

print("=== Row counts ===")
for table in (
    "categories",
    "products",
    "customers",
    "quotes",
    "contact_messages",
    "job_applications",
    "job_positions",
    "blog_posts",
    "comments",
    "projects",
    "media_items",
    "solar_packages",
    "package_products",
    "revoked_tokens",
):
    try:
        cur.execute(f"SELECT COUNT(*) FROM {table}")
        print(f"{table:20s} {cur.fetchone()[0]}")
    except sqlite3.OperationalError as e:
        print(f"{table:20s} missing ({e})")

print("\n=== Products without a matching category ===")
cur.execute(
    "SELECT p.sku, p.category FROM products p LEFT JOIN categories c ON c.slug = p.category WHERE c.id IS NULL"
)
for r in cur.fetchall():
    print(r)

print("\n=== Recent quotes ===")
cur.execute(
    "SELECT id, customer_name, product_sku, status, date FROM quotes ORDER BY date DESC LIMIT 20"
)
for r in cur.fetchall():
    print(r)

print("\n=== Settings ===")
cur.execute("SELECT key, value FROM app_settings")
for key, value in cur.fetchall():
    if key == "gemini_api_key":
        value = "<set>" if value and value != '""' else "<empty>"
    else:
        try:
            value = json.loads(value)
        except (TypeError, ValueError):
            pass
    print({"key": key, "value": value})

if SKU:
    print(f"\n=== Packages containing SKU={SKU} ===")
    cur.execute(
        "SELECT sp.id, sp.name, pp.quantity, pp.unit_price FROM package_products pp "
        "JOIN solar_packages sp ON sp.id = pp.package_id "
        "JOIN products p ON p.id = pp.product_id WHERE p.sku = ?",
        (SKU,),
    )
    for r in cur.fetchall():
        print(r)

conn.close()
