"""Static lookup tables for food labels."""

from types import MappingProxyType

DEFAULT_CATEGORY = "Other"

FOOD_CATEGORIES: MappingProxyType[str, str] = MappingProxyType(
    {
        # Fruits
        "Apple": "Fruits",
        "Banana": "Fruits",
        "Orange": "Fruits",
        "Strawberry": "Fruits",
        "Grapes": "Fruits",
        "Watermelon": "Fruits",
        "Pineapple": "Fruits",
        "Mango": "Fruits",
        "Peach": "Fruits",
        "Pear": "Fruits",
        # Vegetables
        "Broccoli": "Vegetables",
        "Carrot": "Vegetables",
        "Tomato": "Vegetables",
        "Lettuce": "Vegetables",
        "Spinach": "Vegetables",
        "Bell Pepper": "Vegetables",
        "Cucumber": "Vegetables",
        "Onion": "Vegetables",
        "Potato": "Vegetables",
        "Sweet Potato": "Vegetables",
        # Proteins
        "Chicken": "Protein",
        "Beef": "Protein",
        "Fish": "Protein",
        "Salmon": "Protein",
        "Egg": "Protein",
        "Turkey": "Protein",
        "Pork": "Protein",
        "Shrimp": "Protein",
        "Tofu": "Protein",
        "Beans": "Protein",
        # Grains
        "Rice": "Grains",
        "Bread": "Grains",
        "Pasta": "Grains",
        "Quinoa": "Grains",
        "Oats": "Grains",
        "Cereal": "Grains",
        "Noodles": "Grains",
        # Dairy
        "Milk": "Dairy",
        "Cheese": "Dairy",
        "Yogurt": "Dairy",
        "Butter": "Dairy",
        "Ice Cream": "Dairy",
        # Prepared dishes and snacks
        "Pizza": "Fast Food",
        "Burger": "Fast Food",
        "Sandwich": "Fast Food",
        "Salad": "Vegetables",
        "Soup": "Mixed",
        "Cookie": "Desserts",
        "Cake": "Desserts",
        "Chocolate": "Desserts",
    }
)

FOOD_KEYWORDS: tuple[str, ...] = (
    "apple",
    "banana",
    "orange",
    "strawberry",
    "grapes",
    "watermelon",
    "broccoli",
    "carrot",
    "tomato",
    "lettuce",
    "spinach",
    "pepper",
    "chicken",
    "beef",
    "fish",
    "salmon",
    "egg",
    "turkey",
    "rice",
    "bread",
    "pasta",
    "quinoa",
    "oats",
    "cereal",
    "milk",
    "cheese",
    "yogurt",
    "pizza",
    "burger",
    "sandwich",
    "salad",
    "soup",
    "cookie",
    "cake",
    "chocolate",
)

FOOD_PARENT_NAMES = frozenset({"Food", "Fruit", "Vegetable", "Meat", "Dairy", "Grain"})

GENERIC_FOOD_LABELS = frozenset(
    {"Food", "Fruit", "Vegetable", "Meat", "Dairy", "Grain", "Plant"}
)


def food_category(name: str) -> str:
    """Return the nutrition category for a canonical food name."""
    return FOOD_CATEGORIES.get(name, DEFAULT_CATEGORY)
