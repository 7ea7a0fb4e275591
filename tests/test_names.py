"""pytest tests for the identity resolver."""

import random

from sla.names import ADJECTIVES, NOUNS, resolve_name, silly_name


def test_given_name_is_kept():
    assert resolve_name("alice") == "alice"


def test_missing_name_gets_placeholder():
    assert resolve_name("")
    assert resolve_name(None)


def test_silly_name_is_adjective_plus_noun():
    name = silly_name(random.Random(7))
    assert any(name.startswith(a) and name[len(a):] in NOUNS for a in ADJECTIVES)
    assert name.isalpha()


def test_placeholders_vary():
    names = {resolve_name("") for _ in range(50)}
    assert len(names) > 1
