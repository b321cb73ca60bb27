import pytest

from flipdeck.domain.common.exceptions import DomainError, ValidationError
from flipdeck.domain.common.value_objects.ids import CardId, UserId
from flipdeck.domain.learning.entities.card import Card, CardContent


def test_create_with_id() -> None:
    """Test reconstituting a card from the store."""
    card = Card.create_with_id(id="42", front="Hola", back="Hello")

    assert card.id == CardId("42")
    assert card.front == "Hola"
    assert card.back == "Hello"


def test_empty_front_raises_error() -> None:
    with pytest.raises(DomainError, match="Front cannot be empty"):
        Card.create_with_id(id="1", front="", back="Hello")


def test_whitespace_only_back_raises_error() -> None:
    with pytest.raises(ValidationError, match="Back cannot be empty"):
        Card.create_with_id(id="1", front="Hola", back="   ")


def test_empty_id_raises_error() -> None:
    with pytest.raises(ValidationError, match="CardId must be a non-empty string"):
        CardId("")


def test_revise_keeps_id() -> None:
    card = Card.create_with_id(id="1", front="Hola", back="Hello")

    revised = card.revise(CardContent(front="Hola", back="Hi"))

    assert revised.id == card.id
    assert revised.back == "Hi"
    assert card.back == "Hello"


def test_revise_rejects_blank_content() -> None:
    card = Card.create_with_id(id="1", front="Hola", back="Hello")
    with pytest.raises(DomainError):
        card.revise(CardContent(front="", back="Hi"))


def test_content_round_trip() -> None:
    card = Card.create_with_id(id="1", front="Hola", back="Hello")
    assert card.content == CardContent(front="Hola", back="Hello")


@pytest.mark.parametrize(
    ("front", "back", "complete"),
    [("Hola", "Hello", True), ("", "Hello", False), ("Hola", " ", False), ("", "", False)],
)
def test_content_is_complete(front: str, back: str, complete: bool) -> None:
    assert CardContent(front=front, back=back).is_complete() is complete


def test_ids_of_different_types_are_not_equal() -> None:
    assert CardId("1") != UserId("1")
    assert CardId("1") == CardId("1")
    assert hash(CardId("1")) == hash(CardId("1"))
