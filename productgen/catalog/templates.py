"""Word pools and text templates for synthetic product listings."""

DEFAULT_CATEGORY = "Apparel"

# Product name templates by collection category
PRODUCT_TEMPLATES: dict[str, list[str]] = {
    "Apparel": [
        "Classic {adjective} {item}",
        "Premium {adjective} {item}",
        "Vintage {adjective} {item}",
        "Modern {adjective} {item}",
        "Essential {adjective} {item}",
    ],
    "Accessories": [
        "{adjective} {item}",
        "Designer {adjective} {item}",
        "Luxury {adjective} {item}",
        "Handcrafted {adjective} {item}",
    ],
}

ADJECTIVES = [
    "Elegant", "Stylish", "Comfortable", "Trendy",
    "Classic", "Bold", "Minimalist", "Sophisticated",
]

# Item nouns by collection category
ITEMS: dict[str, list[str]] = {
    "Apparel": ["T-Shirt", "Hoodie", "Jacket", "Sweater", "Shirt", "Pants", "Jeans", "Dress"],
    "Accessories": ["Belt", "Hat", "Scarf", "Bag", "Watch", "Sunglasses", "Wallet"],
}

DESCRIPTION_TEMPLATES = [
    "Discover the perfect blend of style and comfort with our {title}. "
    "Crafted with premium materials and attention to detail, this piece is "
    "designed to elevate your wardrobe.",
    "Introducing the {title} from our {collection}. This versatile piece "
    "combines timeless design with modern functionality, making it a "
    "must-have addition to your collection.",
    "Experience luxury with the {title}. Made with high-quality materials "
    "and expert craftsmanship, this item offers both style and durability "
    "for everyday wear.",
    "The {title} is the epitome of contemporary fashion. Designed for those "
    "who appreciate quality and style, this piece seamlessly fits into any "
    "wardrobe.",
]
