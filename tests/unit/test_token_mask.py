"""
Tests for bot token masking.
"""

import pytest

from utils.token_mask import BOT_TOKEN_PLACEHOLDER, mask, unmask

TOKEN = "123456:ABC-secret_TOKEN"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "no token here",
        f"https://api.telegram.org/file/bot{TOKEN}/photos/a.jpg",
        f"{TOKEN}{TOKEN} and {TOKEN}",
        f"already {BOT_TOKEN_PLACEHOLDER} and {TOKEN}",
    ],
)
def test_mask_removes_every_occurrence(text):
    masked = mask(text, TOKEN)

    assert TOKEN not in masked
    assert mask(unmask(masked, TOKEN), TOKEN) == masked


def test_mask_replaces_all_occurrences():
    assert mask(f"a{TOKEN}b{TOKEN}", TOKEN) == f"a{BOT_TOKEN_PLACEHOLDER}b{BOT_TOKEN_PLACEHOLDER}"


def test_unmask_restores_token():
    url = f"https://api.telegram.org/file/bot{TOKEN}/photos/a.jpg"

    assert unmask(mask(url, TOKEN), TOKEN) == url


def test_regex_characters_are_literal():
    token = "1.2+3"

    assert mask("1x2+3 1.2+3", token) == f"1x2+3 {BOT_TOKEN_PLACEHOLDER}"


def test_empty_token_is_identity():
    assert mask("anything", "") == "anything"
    assert unmask(BOT_TOKEN_PLACEHOLDER, "") == BOT_TOKEN_PLACEHOLDER
