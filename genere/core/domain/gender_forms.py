# genere/core/domain/gender_forms.py
"""
Gender-dependent word forms.

Two surface syntaxes pick a word form from a governing gender:

- Median-point forms, as in French inclusive writing: `un·e`,
  `sorci·er·ère`, `voleu·r·se·s`. Parts are root, then the masculine,
  feminine and shared suffixes.
- Slash forms: `He/She`, `Il/Elle/Iel` (the optional third branch is the
  neutral form).

Either may end with `[dependency]` to be governed by another symbol's gender
instead of the enclosing symbol's declared dependency. Branches are words;
use an escaped space (`du/de~ la`) to put several words in a branch.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

from genere.core.domain.escaping import sentinel
from genere.core.domain.models import Gender

GenderLookup = Callable[[str], Gender]
"""Resolves the gender of a dependency named inline, e.g. `He/She[hero]`."""

# Sentinel characters count as word characters so escaped text can sit in a branch.
_WORD = r"[\w~<>]"

MEDIAN_FORM = re.compile(
    rf"({_WORD}+)·({_WORD}*)(?:·({_WORD}*))?(?:·({_WORD}*))?(?:\[({_WORD}+)\])?"
)
SLASH_FORM = re.compile(
    rf"({_WORD}*)/({_WORD}*)(?:/({_WORD}*))?(?:\[(\w+)\])?"
)

# Neutral median-point output must not be read again by the slash pass.
_NEUTRAL_JOIN = sentinel("/")


@dataclass(frozen=True)
class MedianForm:
    """
    A parsed median-point form.

    Arity:
        2 parts: `un·e` -> masculine "un", feminine "une".
        3 parts: `sorci·er·ère` -> "sorcier" / "sorcière".
        4 parts: `voleu·r·se·s` -> "voleurs" / "voleuses".
    """

    root: str
    masculine: str
    feminine: str
    shared: str = ""
    dependency: Optional[str] = None

    @classmethod
    def from_match(cls, match: "re.Match[str]") -> "MedianForm":
        root, second, third, fourth, dependency = match.groups()
        if third is None:
            return cls(root=root, masculine="", feminine=second, dependency=dependency)
        return cls(
            root=root,
            masculine=second,
            feminine=third,
            shared=fourth or "",
            dependency=dependency,
        )

    def render(self, gender: Gender) -> str:
        male = f"{self.root}{self.masculine}{self.shared}"
        female = f"{self.root}{self.feminine}{self.shared}"
        if gender is Gender.MALE:
            return male
        if gender is Gender.FEMALE:
            return female
        return f"{male}{_NEUTRAL_JOIN}{female}"


@dataclass(frozen=True)
class SlashForm:
    """A parsed `male/female[/neutral]` form."""

    male: str
    female: str
    neutral: Optional[str] = None
    dependency: Optional[str] = None

    @classmethod
    def from_match(cls, match: "re.Match[str]") -> "SlashForm":
        male, female, neutral, dependency = match.groups()
        return cls(male=male, female=female, neutral=neutral, dependency=dependency)

    def render(self, gender: Gender) -> str:
        if gender is Gender.MALE:
            return self.male
        if gender is Gender.FEMALE:
            return self.female
        if self.neutral is not None:
            return self.neutral
        # No neutral form was written: show both.
        return f"{self.male}/{self.female}"


def _governing_gender(dependency: Optional[str], default: Gender, lookup: GenderLookup) -> Gender:
    if dependency is None:
        return default
    return lookup(dependency)


def rewrite_median_forms(text: str, default: Gender, lookup: GenderLookup) -> str:
    """Replace every median-point form in `text` by the form for its gender."""

    def _replace(match: "re.Match[str]") -> str:
        form = MedianForm.from_match(match)
        return form.render(_governing_gender(form.dependency, default, lookup))

    return MEDIAN_FORM.sub(_replace, text)


def rewrite_slash_forms(text: str, default: Gender, lookup: GenderLookup) -> str:
    """Replace every slash form in `text` by the branch for its gender."""

    def _replace(match: "re.Match[str]") -> str:
        form = SlashForm.from_match(match)
        return form.render(_governing_gender(form.dependency, default, lookup))

    return SLASH_FORM.sub(_replace, text)
