from dotenv import load_dotenv

# Load environment variables from .env
load_dotenv()


if __name__ == "__main__":
    print("Seeding listings (as package module 'pawmart.seed') from project root...")

    try:
        from pawmart.db import DB_NAME, client, get_db, ping_store
        from pawmart.seed import seed_listings
    except Exception as e:
        raise SystemExit(f"Failed to import 'pawmart.seed.seed_listings': {e}")

    print(f"Using database '{DB_NAME}'")

    try:
        ping_store()
        inserted = seed_listings(get_db())
    except Exception as e:
        raise SystemExit(f"Seeding failed: {e}")
    finally:
        client.close()

    if inserted:
        print(f"Inserted {inserted} sample listings.")
    else:
        print("Listings collection is not empty; nothing inserted.")
