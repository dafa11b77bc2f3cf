"""Demo catalogue: one admin account, six products, six portfolio pieces."""

from sokobo.catalogue.services import ProductService
from sokobo.config import Settings
from sokobo.identity.services import UserService
from sokobo.identity.user import Role
from sokobo.portfolio.services import PortfolioService
from sokobo.utils.logging import get_logger

logger = get_logger(__name__)

_UNSPLASH = "https://images.unsplash.com/photo-{}?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&h={}"

DEMO_PRODUCTS = [
    {
        "name": "Sokobo Classic Tee",
        "category": "tshirts",
        "description": "Premium cotton streetwear with signature graphics. Comfortable fit with bold Sokobo branding.",
        "price": "350.00",
        "stock": 50,
        "sizes": ["S", "M", "L", "XL", "XXL"],
        "images": [_UNSPLASH.format("1521572163474-6864f9cf17ab", 800), _UNSPLASH.format("1503341504253-dff4815485f1", 800)],
        "featured": True,
    },
    {
        "name": "Sokobo Street Hoodie",
        "category": "hoodies",
        "description": "Oversized fit with bold graphics and premium comfort. Perfect for the urban lifestyle.",
        "price": "650.00",
        "stock": 30,
        "sizes": ["S", "M", "L", "XL", "XXL"],
        "images": [_UNSPLASH.format("1556821840-3a63f95609a7", 800), _UNSPLASH.format("1509631179647-0177331693ae", 600)],
        "featured": True,
    },
    {
        "name": "Sokobo Signature Cap",
        "category": "hats",
        "description": "Embroidered logo with adjustable strap. Classic streetwear essential.",
        "price": "250.00",
        "stock": 75,
        "sizes": ["One Size"],
        "images": [_UNSPLASH.format("1588850561407-ed78c282e89b", 800), _UNSPLASH.format("1575428652377-a2d80e2277fc", 600)],
        "featured": True,
    },
    {
        "name": "Urban Flow Tee",
        "category": "tshirts",
        "description": "Minimalist design with contemporary graphics. Essential streetwear piece.",
        "price": "320.00",
        "stock": 40,
        "sizes": ["S", "M", "L", "XL"],
        "images": [_UNSPLASH.format("1521572163474-6864f9cf17ab", 800)],
        "featured": False,
    },
    {
        "name": "Midnight Hoodie",
        "category": "hoodies",
        "description": "All-black premium hoodie with subtle branding. Perfect for any occasion.",
        "price": "720.00",
        "stock": 25,
        "sizes": ["M", "L", "XL", "XXL"],
        "images": [_UNSPLASH.format("1556821840-3a63f95609a7", 800)],
        "featured": False,
    },
    {
        "name": "Classic Snapback",
        "category": "hats",
        "description": "Flat brim snapback with embroidered logo. Adjustable fit for maximum comfort.",
        "price": "280.00",
        "stock": 60,
        "sizes": ["One Size"],
        "images": [_UNSPLASH.format("1588850561407-ed78c282e89b", 800)],
        "featured": False,
    },
]

DEMO_PORTFOLIO = [
    {
        "title": "Brand Identity Design",
        "description": "Complete brand identity package for local business including logo design, "
        "color palette, and brand guidelines.",
        "images": [_UNSPLASH.format("1626785774573-4b799315345d", 600)],
        "category": "branding",
    },
    {
        "title": "Custom Apparel Collection",
        "description": "Unique designs for streetwear collection featuring bold graphics and contemporary aesthetics.",
        "images": [_UNSPLASH.format("1503341504253-dff4815485f1", 600)],
        "category": "apparel",
    },
    {
        "title": "Print Design Materials",
        "description": "Business cards and marketing materials with elegant typography and professional layout.",
        "images": [_UNSPLASH.format("1626785774573-4b799315345d", 600)],
        "category": "print",
    },
    {
        "title": "Event Poster Campaign",
        "description": "Eye-catching promotional materials with bold graphics and modern design elements.",
        "images": [_UNSPLASH.format("1611224923853-80b023f02d71", 600)],
        "category": "print",
    },
    {
        "title": "Digital Artwork Series",
        "description": "Original illustrations and artwork featuring vibrant colors and contemporary street art style.",
        "images": [_UNSPLASH.format("1513475382585-d06e58bcb0e0", 600)],
        "category": "digital",
    },
    {
        "title": "Web Design Project",
        "description": "Modern website and app interfaces with clean layouts and intuitive user experience.",
        "images": [_UNSPLASH.format("1467232004584-a241de8bcf5d", 600)],
        "category": "digital",
    },
]


def seed_demo_data(storage, settings: Settings) -> bool:
    """Populate an empty store. Returns False when there was already data."""
    if storage.products.count() > 0:
        logger.info("seed_skipped", reason="catalogue not empty")
        return False

    users = UserService(storage.users)
    if users.by_email(settings.admin_email) is None:
        users.register(
            name=settings.admin_name,
            email=settings.admin_email,
            password=settings.admin_password,
            role=Role.ADMIN.value,
        )

    products = ProductService(storage.products)
    for product in DEMO_PRODUCTS:
        products.create(**product)

    portfolio = PortfolioService(storage.portfolio)
    for item in DEMO_PORTFOLIO:
        portfolio.create(**item)

    logger.info("seed_completed", products=len(DEMO_PRODUCTS), portfolio=len(DEMO_PORTFOLIO))
    return True
