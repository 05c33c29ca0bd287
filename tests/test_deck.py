import pytest
from pydantic import ValidationError

from slidedeck.deck import Deck
from slidedeck.errors import DeckSealed, OutOfRangeIndex
from slidedeck.models import make_slide


def test_append_returns_index():
    deck = Deck()
    assert deck.append(make_slide("A")) == 0
    assert deck.append(make_slide("B")) == 1
    assert deck.length() == 2
    assert deck.titles() == ["A", "B"]


def test_get_out_of_range():
    deck = Deck([make_slide("A")])
    assert deck.get(0).title == "A"
    with pytest.raises(OutOfRangeIndex):
        deck.get(1)
    with pytest.raises(OutOfRangeIndex):
        deck.get(-1)


def test_out_of_range_is_an_index_error():
    with pytest.raises(IndexError):
        Deck().get(0)


def test_sealed_deck_rejects_append():
    deck = Deck([make_slide("A")]).seal()
    with pytest.raises(DeckSealed):
        deck.append(make_slide("B"))
    assert len(deck) == 1


def test_slides_are_immutable():
    slide = make_slide("A", "<p>x</p>")
    with pytest.raises(ValidationError):
        slide.title = "B"
