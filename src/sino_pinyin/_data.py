"""
Lookup tables for Hanyu Pinyin tone marks.

Provides:
- DIACRITICS: base vowel → toned forms, indexed by tone 0-5
- IRREGULAR_M: toned forms of the nasal-only syllable m/M
- FINALS: valid syllable finals, used to find the marked part of a syllable
- SYLLABLE_PATTERN: regex matching a single Pinyin syllable
- TONE_CLASSES: every character carrying tones 1-4

All tables are built once at import and are read-only afterwards.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

__all__ = [
    "DIACRITICS",
    "IRREGULAR_M",
    "FINALS",
    "SYLLABLES",
    "SYLLABLE_PATTERN",
    "TONE_MARKS",
    "TONE_CLASSES",
    "SKELETON",
    "build_tone_classes",
    "build_skeleton",
]

# Unicode combining marks for tones 1-4
TONE_MARKS = MappingProxyType(
    {
        1: "\u0304",  # combining macron
        2: "\u0301",  # combining acute accent
        3: "\u030c",  # combining caron
        4: "\u0300",  # combining grave accent
    }
)

# Tones 0 and 5 are both neutral: plain vowel at both ends of the row
DIACRITICS = MappingProxyType(
    {
        "a": ("a", "ā", "á", "ǎ", "à", "a"),
        "e": ("e", "ē", "é", "ě", "è", "e"),
        "i": ("i", "ī", "í", "ǐ", "ì", "i"),
        "o": ("o", "ō", "ó", "ǒ", "ò", "o"),
        "u": ("u", "ū", "ú", "ǔ", "ù", "u"),
        "ü": ("ü", "ǖ", "ǘ", "ǚ", "ǜ", "ü"),
        "A": ("A", "Ā", "Á", "Ǎ", "À", "A"),
        "E": ("E", "Ē", "É", "Ě", "È", "E"),
        "I": ("I", "Ī", "Í", "Ǐ", "Ì", "I"),
        "O": ("O", "Ō", "Ó", "Ǒ", "Ò", "O"),
        "U": ("U", "Ū", "Ú", "Ǔ", "Ù", "U"),
        "Ü": ("Ü", "Ǖ", "Ǘ", "Ǚ", "Ǜ", "Ü"),
    }
)

# Only tone 2 has a precomposed form; the rest use a combining mark
IRREGULAR_M = (
    "m", "m\u0304", "ḿ", "m\u030c", "m\u0300", "m",
    "M", "M\u0304", "Ḿ", "M\u030c", "M\u0300", "M",
)

FINALS = frozenset(
    {
        # Simple and compound finals
        "a", "o", "e", "ai", "ei", "ao", "ou",
        "an", "en", "ang", "eng", "ong", "er",
        # i- finals
        "i", "ia", "ie", "iao", "iu", "ian", "in", "iang", "ing", "iong",
        # u- finals
        "u", "ua", "uo", "uai", "ui", "uan", "un", "uang", "ueng",
        # ü- finals (written with u after j, q, x, y)
        "ü", "üe", "üan", "ün", "ue",
        # Nasal-only syllable and untoned rhotic suffix
        "m", "r",
    }
)

SYLLABLES = tuple(
    """
    a ai an ang ao e ei en eng er o ou
    yi ya yo ye yao you yan yin yang ying yong yu yue yuan yun
    wu wa wo wai wei wan wen wang weng
    ba bo bai bei bao ban ben bang beng bi bie biao bian bin bing bu
    pa po pai pei pao pou pan pen pang peng pi pie piao pian pin ping pu
    ma mo me mai mei mao mou man men mang meng mi mie miao miu mian min ming mu
    fa fo fei fou fan fen fang feng fu
    da de dai dei dao dou dan den dang deng dong di dia die diao diu dian ding
    du duo dui duan dun
    ta te tai tao tou tan tang teng tong ti tie tiao tian ting tu tuo tui tuan tun
    na ne nai nei nao nou nan nen nang neng nong ni nie niao niu nian nin niang
    ning nu nuo nuan nü nüe
    la le lo lai lei lao lou lan lang leng long li lia lie liao liu lian lin
    liang ling lu luo luan lun lü lüe
    ga ge gai gei gao gou gan gen gang geng gong gu gua guo guai gui guan gun guang
    ka ke kai kei kao kou kan ken kang keng kong ku kua kuo kuai kui kuan kun kuang
    ha he hai hei hao hou han hen hang heng hong hu hua huo huai hui huan hun huang
    ji jia jie jiao jiu jian jin jiang jing jiong ju jue juan jun
    qi qia qie qiao qiu qian qin qiang qing qiong qu que quan qun
    xi xia xie xiao xiu xian xin xiang xing xiong xu xue xuan xun
    zha zhe zhi zhai zhei zhao zhou zhan zhen zhang zheng zhong zhu zhua zhuo
    zhuai zhui zhuan zhun zhuang
    cha che chi chai chao chou chan chen chang cheng chong chu chua chuo chuai
    chui chuan chun chuang
    sha she shi shai shei shao shou shan shen shang sheng shu shua shuo shuai
    shui shuan shun shuang
    re ri rao rou ran ren rang reng rong ru rua ruo rui ruan run
    za ze zi zai zei zao zou zan zen zang zeng zong zu zuo zui zuan zun
    ca ce ci cai cao cou can cen cang ceng cong cu cuo cui cuan cun
    sa se si sai sao sou san sen sang seng song su suo sui suan sun
    m hm
    """.split()
)


def build_tone_classes(
    diacritics: Mapping[str, tuple[str, ...]],
) -> MappingProxyType:
    """Collect every character that carries each of tones 1-4."""
    classes: dict[int, set[str]] = {tone: {mark} for tone, mark in TONE_MARKS.items()}
    for forms in diacritics.values():
        for tone in TONE_MARKS:
            classes[tone].add(forms[tone])
    for offset in (0, 6):
        for tone in TONE_MARKS:
            # Multi-character forms are covered by the combining mark
            form = IRREGULAR_M[offset + tone]
            if len(form) == 1:
                classes[tone].add(form)
    return MappingProxyType(
        {tone: frozenset(chars) for tone, chars in classes.items()}
    )


TONE_CLASSES = build_tone_classes(DIACRITICS)


def build_skeleton(diacritics: Mapping[str, tuple[str, ...]]) -> MappingProxyType:
    """Map each precomposed toned character to its base letter, one-to-one."""
    pairs = {}
    for base, forms in diacritics.items():
        for form in forms:
            if form != base:
                pairs[form] = base
    pairs["ḿ"] = "m"
    pairs["Ḿ"] = "M"
    return MappingProxyType(str.maketrans(pairs))


# Translating with SKELETON never changes string length, so offsets found
# in the skeleton are valid in the original text.
SKELETON = build_skeleton(DIACRITICS)

# Each letter may be followed by a combining tone mark (decomposed input, toned m)
_MARK = "[" + "".join(TONE_MARKS.values()) + "]?"


# A syllable ending in n, ng or r never borrows the consonant of a following
# vowel-initial syllable: Henan splits as he-nan, not hen-an
_CODA_ENDINGS = ("n", "ng", "r")
_NO_VOWEL_NEXT = "(?![aeiouü])"


def _syllable_regex(syllables: tuple[str, ...]) -> str:
    """Build an alternation trying longer syllables first."""
    ordered = sorted(syllables, key=lambda s: (-len(s), s))
    alternatives = []
    for syllable in ordered:
        alternative = "".join(re.escape(c) + _MARK for c in syllable)
        if syllable.endswith(_CODA_ENDINGS):
            alternative += _NO_VOWEL_NEXT
        alternatives.append(alternative)
    return "|".join(alternatives)


SYLLABLE_PATTERN = re.compile(_syllable_regex(SYLLABLES), re.IGNORECASE)
