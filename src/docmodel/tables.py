# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from typing import Final

DOCTYPES: Final[dict[str, str]] = {
    "xhtml11": (
        '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.1//EN" '
        '"http://www.w3.org/TR/xhtml11/DTD/xhtml11.dtd">'
    ),
    "xhtml1-strict": (
        '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Strict//EN" '
        '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-strict.dtd">'
    ),
    "xhtml1-trans": (
        '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Transitional//EN" '
        '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd">'
    ),
    "xhtml1-frame": (
        '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Frameset//EN" '
        '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-frameset.dtd">'
    ),
    "html5": "<!DOCTYPE html>",
    "html4-strict": (
        '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01//EN" '
        '"http://www.w3.org/TR/html4/strict.dtd">'
    ),
    "html4-trans": (
        '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01 Transitional//EN" '
        '"http://www.w3.org/TR/html4/loose.dtd">'
    ),
    "html4-frame": (
        '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01 Frameset//EN" '
        '"http://www.w3.org/TR/html4/frameset.dtd">'
    ),
}

EOL_TOKENS: Final[dict[str, str]] = {
    "unix": "\n",
    "mac": "\r",
    "win": "\r\n",
}

# ISO 639-1
VALID_LANGUAGES: Final[frozenset[str]] = frozenset(
    (
        "aa", "ab", "af", "ak", "sq", "am", "ar", "an", "hy", "as",
        "av", "ae", "ay", "az", "ba", "bm", "eu", "be", "bn", "bh", "bi",
        "bs", "br", "bg", "my", "ca", "ch", "ce", "zh", "cu", "cv", "kw",
        "co", "cr", "cs", "da", "dv", "nl", "dz", "en", "eo", "et", "ee",
        "fo", "fj", "fi", "fr", "fy", "ff", "ka", "de", "gd", "ga", "gl",
        "gv", "el", "gn", "gu", "ht", "ha", "he", "hz", "hi", "ho", "hr",
        "hu", "ig", "is", "io", "ii", "iu", "ie", "ia", "id", "ik", "it",
        "jv", "ja", "kl", "kn", "ks", "kr", "kk", "km", "ki", "rw", "ky",
        "kv", "kg", "ko", "kj", "ku", "lo", "la", "lv", "li", "ln", "lt",
        "lb", "lu", "lg", "mk", "mh", "ml", "mi", "mr", "ms", "mg", "mt",
        "mn", "na", "nv", "nr", "nd", "ng", "ne", "nn", "nb", "no", "ny",
        "oc", "oj", "or", "om", "os", "pa", "fa", "pi", "pl", "pt", "ps",
        "qu", "rm", "ro", "rn", "ru", "sg", "sa", "si", "sk", "sl", "se",
        "sm", "sn", "sd", "so", "st", "es", "sc", "sr", "ss", "su", "sw",
        "sv", "ty", "ta", "tt", "te", "tg", "tl", "th", "bo", "ti", "to",
        "tn", "ts", "tk", "tr", "tw", "ug", "uk", "ur", "uz", "ve", "vi",
        "vo", "cy", "wa", "wo", "xh", "yi", "yo", "za", "zu",
    ),  # fmt: skip
)

CORE_CONTAINERS: Final[tuple[str, ...]] = (
    "title",
    "metas",
    "stylesheets",
    "cssBlocks",
    "scripts",
    "scriptBlocks",
    "scriptBlocksBottom",
)
