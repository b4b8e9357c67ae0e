# pawmart/seed.py
"""Sample listings inserted into an empty `listings` collection."""
from pymongo.database import Database
from . import crud
from .utils import logger

def _pexels(photo_id: int) -> str:
    return (
        f"https://images.pexels.com/photos/{photo_id}/pexels-photo-{photo_id}.jpeg"
        "?auto=compress&cs=tinysrgb&w=1200"
    )

SAMPLE_LISTINGS = [
    {
        "name": "Golden Retriever Puppy",
        "category": "Pets",
        "price": 0,
        "location": "Dhaka",
        "description": "Friendly 2-month-old puppy looking for a loving family.",
        "image": _pexels(2253275),
        "email": "owner1@pawmart.com",
        "date": "2025-10-27",
    },
    {
        "name": "Persian Cat (Adult)",
        "category": "Pets",
        "price": 0,
        "location": "Chattogram",
        "description": "Calm indoor Persian cat, vaccinated and litter trained.",
        "image": _pexels(2071873),
        "email": "owner2@pawmart.com",
        "date": "2025-11-03",
    },
    {
        "name": "Dog Kibble Large Breed 10kg",
        "category": "Food",
        "price": 3200,
        "location": "Dhaka",
        "description": "Balanced dry food for large breed adult dogs, chicken flavor.",
        "image": _pexels(5731923),
        "email": "shop1@pawmart.com",
        "date": "2025-10-30",
    },
    {
        "name": "Cat Wet Food Tuna Pack",
        "category": "Food",
        "price": 980,
        "location": "Sylhet",
        "description": "Pack of 6 tuna cans, suitable for adult cats of all breeds.",
        "image": _pexels(7310225),
        "email": "shop2@pawmart.com",
        "date": "2025-11-01",
    },
    {
        "name": "Rope Chew Toy",
        "category": "Accessories",
        "price": 350,
        "location": "Dhaka",
        "description": "Durable rope toy for medium-sized dogs, helps reduce boredom.",
        "image": _pexels(5731905),
        "email": "shop1@pawmart.com",
        "date": "2025-10-29",
    },
    {
        "name": "Cat Scratching Post",
        "category": "Accessories",
        "price": 1800,
        "location": "Khulna",
        "description": "Sturdy scratching post to protect your furniture from scratches.",
        "image": _pexels(6869681),
        "email": "shop3@pawmart.com",
        "date": "2025-10-31",
    },
    {
        "name": "Dog Bed Medium Size",
        "category": "Accessories",
        "price": 2300,
        "location": "Dhaka",
        "description": "Soft and washable dog bed suitable for medium breeds.",
        "image": _pexels(5731869),
        "email": "shop4@pawmart.com",
        "date": "2025-11-02",
    },
    {
        "name": "Pet Shampoo Hypoallergenic",
        "category": "Care Products",
        "price": 650,
        "location": "Dhaka",
        "description": "Gentle shampoo suitable for dogs and cats with sensitive skin.",
        "image": _pexels(5731946),
        "email": "shop2@pawmart.com",
        "date": "2025-11-05",
    },
    {
        "name": "Tick & Flea Collar",
        "category": "Care Products",
        "price": 540,
        "location": "Rajshahi",
        "description": "Protects dogs from ticks and fleas for up to 8 weeks.",
        "image": _pexels(5731915),
        "email": "shop5@pawmart.com",
        "date": "2025-11-06",
    },
    {
        "name": "German Shepherd Puppy",
        "category": "Pets",
        "price": 0,
        "location": "Dhaka",
        "description": "Healthy 3-month-old puppy, vaccinated and active.",
        "image": _pexels(2253275),
        "email": "owner3@pawmart.com",
        "date": "2025-11-10",
    },
    {
        "name": "Parrot Cage with Stand",
        "category": "Accessories",
        "price": 5200,
        "location": "Chattogram",
        "description": "Spacious cage suitable for medium-sized parrots with perch.",
        "image": _pexels(5726979),
        "email": "shop6@pawmart.com",
        "date": "2025-11-12",
    },
    {
        "name": "Kitten Starter Pack",
        "category": "Care Products",
        "price": 1500,
        "location": "Dhaka",
        "description": "Includes litter, small toy, bowl and grooming brush.",
        "image": _pexels(6869639),
        "email": "shop4@pawmart.com",
        "date": "2025-11-14",
    },
    {
        "name": "Adult Cat Adoption",
        "category": "Pets",
        "price": 0,
        "location": "Sylhet",
        "description": "Calm 4-year-old cat, already neutered and vaccinated.",
        "image": _pexels(6869639),
        "email": "owner4@pawmart.com",
        "date": "2025-11-15",
    },
    {
        "name": "Puppy Training Pads Pack",
        "category": "Care Products",
        "price": 900,
        "location": "Dhaka",
        "description": "Absorbent training pads for house-training young puppies.",
        "image": _pexels(5731921),
        "email": "shop7@pawmart.com",
        "date": "2025-11-16",
    },
    {
        "name": "Cat Toy Set (3 pcs)",
        "category": "Accessories",
        "price": 420,
        "location": "Khulna",
        "description": "Interactive toy set to keep indoor cats active and engaged.",
        "image": _pexels(6869682),
        "email": "shop4@pawmart.com",
        "date": "2025-11-18",
    },
    {
        "name": "Rabbit Hutch Outdoor",
        "category": "Accessories",
        "price": 6400,
        "location": "Chattogram",
        "description": "Wooden outdoor hutch with waterproof roof and feeder.",
        "image": _pexels(4588025),
        "email": "shop8@pawmart.com",
        "date": "2025-11-20",
    },
    {
        "name": "Fish Food Flakes 500g",
        "category": "Food",
        "price": 550,
        "location": "Rajshahi",
        "description": "Nutritious flakes suitable for most tropical aquarium fish.",
        "image": _pexels(128756),
        "email": "shop9@pawmart.com",
        "date": "2025-11-22",
    },
    {
        "name": "Shih Tzu Puppy",
        "category": "Pets",
        "price": 0,
        "location": "Dhaka",
        "description": "Playful indoor puppy, good with families and children.",
        "image": _pexels(4588065),
        "email": "owner5@pawmart.com",
        "date": "2025-11-23",
    },
    {
        "name": "Cat Litter 10L",
        "category": "Care Products",
        "price": 780,
        "location": "Sylhet",
        "description": "Clumping litter with low dust and mild fresh scent.",
        "image": _pexels(5731920),
        "email": "shop2@pawmart.com",
        "date": "2025-11-25",
    },
    {
        "name": "Dog Harness Medium",
        "category": "Accessories",
        "price": 690,
        "location": "Dhaka",
        "description": "Comfort-fit harness suitable for daily walks and training.",
        "image": _pexels(4588011),
        "email": "shop10@pawmart.com",
        "date": "2025-11-26",
    },
]

def seed_listings(db: Database) -> int:
    """Insert SAMPLE_LISTINGS when the collection is empty; return how many were inserted."""
    if crud.count_listings(db) != 0:
        return 0
    # insert_many adds `_id` to the dicts it is given
    result = db.listings.insert_many([dict(listing) for listing in SAMPLE_LISTINGS])
    logger.info("Seeded %d sample listings", len(result.inserted_ids))
    return len(result.inserted_ids)
