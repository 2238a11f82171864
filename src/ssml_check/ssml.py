# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""SsmlChecker - attribute and structure rules for speech markup tags.

One rule per tag. Each rule checks the element's attributes against the
values the target platform accepts, fills in defaults, and decides whether
the element stays, goes, or is replaced by its children.

Supported tags:
    amazon:effect, amazon:emotion, amazon:domain, audio, break, desc,
    emphasis, lang, media, p, par, phoneme, prosody, s, say-as, seq,
    speak, sub, voice, w

Example:
    >>> parent = Element('speak', elements=[Element('break', {'time': '20s'})])
    >>> violations = []
    >>> check_break(parent, 0, violations, parent.elements[0])
    False
    >>> parent.elements[0].attributes
    {'time': '10s'}

Module-level ``check_<tag>`` functions and the VALIDATORS mapping share one
SsmlChecker instance.
"""

from __future__ import annotations

from typing import Any

from .checker import TagCheck, TagCheckerBase, Validator, rule
from .domains import AnyOf, Duration, Identifier, Matches, Measure, OneOf, choices
from .platforms import DEFAULT_LOCALE, LOCALES
from .units import (
    CLOCK_VALUE,
    COUNT,
    DECIBELS,
    IDENTIFIER,
    INFINITY,
    PERCENT,
    PLUS_PERCENT,
    SEMITONES,
    SIGNED_DECIBELS,
    SIGNED_PERCENT,
    SYNCBASE_VALUE,
    TIME_FORMAT,
    matches,
)
from .violations import NONE


class SayAsFormat:
    """``format`` of say-as: a date order for dates, a time pattern on Google."""

    def __init__(self, date_formats: tuple[str, ...]) -> None:
        self.date_formats = date_formats

    def accepts(self, value: Any, check: TagCheck) -> bool:
        if check.attrs.get("interpret-as") == "date":
            return value in self.date_formats
        if check.google:
            return matches(TIME_FORMAT, value)
        # Only dates take a format elsewhere
        return False

    def repair(self, value: Any, check: TagCheck) -> str | None:
        if check.attrs.get("interpret-as") == "date":
            return "mdy"
        if check.google:
            return "hms12"
        return None


class SsmlChecker(TagCheckerBase):
    """Rules for SSML tags on the generic, Amazon and Google platforms."""

    LOCALES = LOCALES
    DEFAULT_LOCALE = DEFAULT_LOCALE
    BREAK_CEILING_MS = 10000

    EFFECTS = choices("whispered")
    EMOTIONS = choices("excited, disappointed")
    INTENSITIES = choices("low, medium, high")
    EMOTION_LOCALES = choices("en-US")
    DOMAIN_LOCALES = choices("en-US, en-AU")
    DOMAIN_NAMES = choices("news")
    US_DOMAIN_NAMES = choices("news, music")
    STRENGTHS = choices("none, x-weak, weak, medium, strong, x-strong")
    EMPHASIS_LEVELS = choices("strong, moderate, reduced")
    ALPHABETS = choices("ipa, x-sampa")
    RATES = choices("x-slow, slow, medium, fast, x-fast")
    PITCHES = choices("x-low, low, medium, high, x-high")
    VOLUMES = choices("silent, x-soft, soft, medium, loud, x-loud")
    INTERPRETATIONS = choices(
        "characters, spell-out, cardinal, ordinal, fraction, unit, date, time, telephone, expletive"
    )
    AMAZON_INTERPRETATIONS = choices("number, digits, address, interjection")
    GOOGLE_INTERPRETATIONS = choices("bleep, verbatim")
    DATE_FORMATS = choices("mdy, dmy, ymd, md, dm, ym, my, d, m, y")
    WORD_ROLES = choices("amazon:VB, amazon:VBD, amazon:NN, amazon:SENSE_1")
    DETAILS = choices("1, 2")

    # -------------------------------------------------------------------------
    # Amazon extensions
    # -------------------------------------------------------------------------

    @rule(tags="amazon:effect")
    def amazon_effect(self, check: TagCheck) -> None:
        check.attributes({"name": OneOf(self.EFFECTS, "whispered")})
        check.require(name="whispered")

    @rule(tags="amazon:emotion")
    def amazon_emotion(self, check: TagCheck) -> None:
        """Emotions exist for US English only; elsewhere keep the text, lose the tag."""
        if check.locale not in self.EMOTION_LOCALES:
            check.report(NONE)
            check.unwrap()
            return

        check.attributes(
            {
                "name": OneOf(self.EMOTIONS, "excited"),
                "intensity": OneOf(self.INTENSITIES, "medium"),
            }
        )
        check.require(name="excited", intensity="medium")

    @rule(tags="amazon:domain")
    def amazon_domain(self, check: TagCheck) -> None:
        """Speaking styles: news in US and Australian English, music in US English."""
        if check.locale not in self.DOMAIN_LOCALES:
            check.report(NONE)
            check.unwrap()
            return

        names = self.US_DOMAIN_NAMES if check.locale == "en-US" else self.DOMAIN_NAMES
        check.attributes({"name": OneOf(names, "news")})
        check.require(name="news")

    @rule(tags="w")
    def w(self, check: TagCheck) -> None:
        check.attributes({"role": OneOf(self.WORD_ROLES, "amazon:VB")})

    # -------------------------------------------------------------------------
    # Audio and timing
    # -------------------------------------------------------------------------

    @rule()
    def audio(self, check: TagCheck) -> None:
        """Audio clip. Without a source there is nothing to play, so it goes."""
        spec: dict[str, Any] = {"src": None}
        if check.google:
            spec.update(
                {
                    "clipBegin": Duration(),
                    "clipEnd": Duration(),
                    "speed": Measure(PLUS_PERCENT, 50, 200, 100, "%"),
                    "repeatCount": Matches(COUNT, "1"),
                    "repeatDur": Duration(),
                    "soundLevel": Measure(SIGNED_DECIBELS, -40, 40, 0, "dB", signed=True),
                    "fadeInDur": Duration(),
                    "fadeOutDur": Duration(),
                }
            )
        check.attributes(spec)

        if "src" not in check.attrs:
            check.report(NONE)
            check.remove()

    @rule()
    def desc(self, check: TagCheck) -> None:
        """Description of an audio clip; meaningless anywhere else."""
        if check.parent is None or check.parent.name != "audio":
            check.report()
            check.remove()

    @rule(tags="break")
    def break_(self, check: TagCheck) -> None:
        check.attributes(
            {
                "strength": OneOf(self.STRENGTHS, "medium"),
                "time": Duration(ceiling=self.BREAK_CEILING_MS, default="10s"),
            }
        )
        if not check.attrs:
            check.attrs["strength"] = "medium"

    @rule(tags="par, seq", children="par, seq, media")
    def timeline(self, check: TagCheck) -> None:
        """par and seq only group other timed elements; no attributes are checked."""

    @rule()
    def media(self, check: TagCheck) -> None:
        check.attributes(
            {
                "xml:id": Identifier(IDENTIFIER),
                "begin": AnyOf(Matches(CLOCK_VALUE), Matches(SYNCBASE_VALUE, "0s")),
                "end": AnyOf(Matches(CLOCK_VALUE), Matches(SYNCBASE_VALUE)),
                "repeatCount": Matches(COUNT, "1"),
                "repeatDur": Duration(default="0s"),
                "soundLevel": Matches(DECIBELS, "+0dB"),
                "fadeInDur": Duration(default="0s"),
                "fadeOutDur": Duration(default="0s"),
            }
        )

    # -------------------------------------------------------------------------
    # Structure
    # -------------------------------------------------------------------------

    @rule()
    def speak(self, check: TagCheck) -> None:
        pass

    @rule(tags="p, s")
    def paragraph(self, check: TagCheck) -> None:
        check.attributes({})

    @rule()
    def lang(self, check: TagCheck) -> None:
        check.attributes({"xml:lang": OneOf(self.LOCALES, self.DEFAULT_LOCALE)})
        check.require(**{"xml:lang": self.DEFAULT_LOCALE})

    @rule()
    def voice(self, check: TagCheck) -> None:
        check.attributes({"name": None})

    # -------------------------------------------------------------------------
    # Pronunciation and delivery
    # -------------------------------------------------------------------------

    @rule()
    def emphasis(self, check: TagCheck) -> None:
        levels = self.EMPHASIS_LEVELS + (("none",) if check.google else ())
        check.attributes({"level": OneOf(levels, "moderate")})
        check.require(level="moderate")

    @rule()
    def phoneme(self, check: TagCheck) -> None:
        check.attributes({"alphabet": OneOf(self.ALPHABETS, "ipa"), "ph": None})

    @rule()
    def prosody(self, check: TagCheck) -> None:
        pitch = [OneOf(self.PITCHES)]
        if check.google:
            pitch.append(Matches(SEMITONES))
        pitch.append(Measure(SIGNED_PERCENT, -33.3, 50, 0, "%", signed=True))

        check.attributes(
            {
                "rate": AnyOf(OneOf(self.RATES), Measure(PERCENT, 20, INFINITY, 100, "%")),
                "pitch": AnyOf(*pitch),
                "volume": AnyOf(OneOf(self.VOLUMES), Matches(SIGNED_DECIBELS, "+0dB")),
            }
        )

    @rule(tags="say-as")
    def say_as(self, check: TagCheck) -> None:
        interpretations = self.INTERPRETATIONS
        if check.amazon:
            interpretations += self.AMAZON_INTERPRETATIONS
        elif check.google:
            interpretations += self.GOOGLE_INTERPRETATIONS

        # interpret-as comes first: format is judged against its corrected value
        spec: dict[str, Any] = {
            "interpret-as": OneOf(interpretations, "cardinal"),
            "format": SayAsFormat(self.DATE_FORMATS),
        }
        if check.google:
            spec["detail"] = OneOf(self.DETAILS, "1")
        check.attributes(spec)

    @rule()
    def sub(self, check: TagCheck) -> None:
        check.attributes({"alias": None})


default_checker = SsmlChecker()

VALIDATORS: dict[str, Validator] = {}
for _tag in default_checker.tags:
    VALIDATORS[_tag] = default_checker.validator(_tag)
    if _tag.startswith("amazon-"):
        VALIDATORS[_tag.replace("-", ":", 1)] = VALIDATORS[_tag]
del _tag

check_amazon_effect = VALIDATORS["amazon-effect"]
check_amazon_emotion = VALIDATORS["amazon-emotion"]
check_amazon_domain = VALIDATORS["amazon-domain"]
check_audio = VALIDATORS["audio"]
check_break = VALIDATORS["break"]
check_desc = VALIDATORS["desc"]
check_emphasis = VALIDATORS["emphasis"]
check_lang = VALIDATORS["lang"]
check_media = VALIDATORS["media"]
check_p = VALIDATORS["p"]
check_par = VALIDATORS["par"]
check_phoneme = VALIDATORS["phoneme"]
check_prosody = VALIDATORS["prosody"]
check_s = VALIDATORS["s"]
check_say_as = VALIDATORS["say-as"]
check_seq = VALIDATORS["seq"]
check_speak = VALIDATORS["speak"]
check_sub = VALIDATORS["sub"]
check_voice = VALIDATORS["voice"]
check_w = VALIDATORS["w"]
