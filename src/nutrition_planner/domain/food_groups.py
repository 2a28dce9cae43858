"""Food catalog offered by the custom meal planner."""

FOOD_GROUPS: dict[str, list[str]] = {
    "Proteins": [
        "Chicken breast",
        "Turkey breast",
        "Lean beef",
        "Salmon",
        "Tuna",
        "Eggs",
        "Egg whites",
        "Tofu",
    ],
    "Carbohydrates": [
        "White rice",
        "Brown rice",
        "Oats",
        "Whole wheat pasta",
        "Potato",
        "Sweet potato",
        "Whole wheat bread",
        "Quinoa",
    ],
    "Fats": [
        "Olive oil",
        "Avocado",
        "Almonds",
        "Walnuts",
        "Peanut butter",
    ],
    "Vegetables": [
        "Broccoli",
        "Spinach",
        "Zucchini",
        "Tomato",
        "Green beans",
        "Mixed salad",
    ],
    "Fruits": [
        "Banana",
        "Apple",
        "Strawberries",
        "Blueberries",
        "Orange",
    ],
    "Dairy": [
        "Greek yogurt",
        "Cottage cheese",
        "Skimmed milk",
        "Fresh cheese",
    ],
}
