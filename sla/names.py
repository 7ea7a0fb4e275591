"""Placeholder caller identities for requests that arrive without ?name=."""

import random

ADJECTIVES = (
    "Bouncy", "Brave", "Chunky", "Crispy", "Dizzy", "Fluffy", "Fuzzy", "Giddy",
    "Grumpy", "Jolly", "Lanky", "Lumpy", "Mighty", "Nimble", "Peppy", "Plucky",
    "Quirky", "Rusty", "Sleepy", "Sneaky", "Soggy", "Spicy", "Squeaky", "Wobbly",
    "Zesty",
)

NOUNS = (
    "Badger", "Biscuit", "Cactus", "Dumpling", "Falcon", "Ferret", "Gecko",
    "Goblin", "Llama", "Marmot", "Moose", "Muffin", "Noodle", "Otter", "Panda",
    "Pickle", "Pumpkin", "Raccoon", "Sprout", "Toaster", "Turnip", "Waffle",
    "Walrus", "Wombat", "Yeti",
)


def silly_name(rng=random):
    return rng.choice(ADJECTIVES) + rng.choice(NOUNS)


def resolve_name(name, rng=random):
    if name:
        return name
    return silly_name(rng)
