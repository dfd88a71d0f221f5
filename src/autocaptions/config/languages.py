"""Languages recognized by the speech engine.

Each language carries the capabilities the timeline builder cares about:
whether captions are wrapped by word count (space-delimited scripts) and
whether the default title style is the CJK one.
"""

from enum import Enum
from typing import List

from .settings import SPACE_LANGUAGES


class Language(Enum):
    """Speech engine language, as (display name, ISO 639-1 code)."""

    ARABIC = ("Arabic", "ar")
    AZERBAIJANI = ("Azerbaijani", "az")
    ARMENIAN = ("Armenian", "hy")
    ALBANIAN = ("Albanian", "sq")
    AFRIKAANS = ("Afrikaans", "af")
    AMHARIC = ("Amharic", "am")
    ASSAMESE = ("Assamese", "as")
    BULGARIAN = ("Bulgarian", "bg")
    BENGALI = ("Bengali", "bn")
    BRETON = ("Breton", "br")
    BASQUE = ("Basque", "eu")
    BOSNIAN = ("Bosnian", "bs")
    BELARUSIAN = ("Belarusian", "be")
    BASHKIR = ("Bashkir", "ba")
    CHINESE_SIMPLIFIED = ("Chinese Simplified", "zh")
    CHINESE_TRADITIONAL = ("Chinese Traditional", "zh-TW")
    CATALAN = ("Catalan", "ca")
    CZECH = ("Czech", "cs")
    CROATIAN = ("Croatian", "hr")
    DUTCH = ("Dutch", "nl")
    DANISH = ("Danish", "da")
    ENGLISH = ("English", "en")
    ESTONIAN = ("Estonian", "et")
    FRENCH = ("French", "fr")
    FINNISH = ("Finnish", "fi")
    FAROESE = ("Faroese", "fo")
    GERMAN = ("German", "de")
    GREEK = ("Greek", "el")
    GALICIAN = ("Galician", "gl")
    GEORGIAN = ("Georgian", "ka")
    GUJARATI = ("Gujarati", "gu")
    HINDI = ("Hindi", "hi")
    HEBREW = ("Hebrew", "he")
    HUNGARIAN = ("Hungarian", "hu")
    HAITIAN_CREOLE = ("Haitian creole", "ht")
    HAWAIIAN = ("Hawaiian", "haw")
    HAUSA = ("Hausa", "ha")
    ITALIAN = ("Italian", "it")
    INDONESIAN = ("Indonesian", "id")
    ICELANDIC = ("Icelandic", "is")
    JAPANESE = ("Japanese", "ja")
    JAVANESE = ("Javanese", "jw")
    KOREAN = ("Korean", "ko")
    KANNADA = ("Kannada", "kn")
    KAZAKH = ("Kazakh", "kk")
    KHMER = ("Khmer", "km")
    LITHUANIAN = ("Lithuanian", "lt")
    LATIN = ("Latin", "la")
    LATVIAN = ("Latvian", "lv")
    LAO = ("Lao", "lo")
    LUXEMBOURGISH = ("Luxembourgish", "lb")
    LINGALA = ("Lingala", "ln")
    MALAY = ("Malay", "ms")
    MAORI = ("Maori", "mi")
    MALAYALAM = ("Malayalam", "ml")
    MACEDONIAN = ("Macedonian", "mk")
    MONGOLIAN = ("Mongolian", "mn")
    MARATHI = ("Marathi", "mr")
    MALTESE = ("Maltese", "mt")
    MYANMAR = ("Myanmar", "my")
    MALAGASY = ("Malagasy", "mg")
    NORWEGIAN = ("Norwegian", "no")
    NEPALI = ("Nepali", "ne")
    NYNORSK = ("Nynorsk", "nn")
    OCCITAN = ("Occitan", "oc")
    PORTUGUESE = ("Portuguese", "pt")
    POLISH = ("Polish", "pl")
    PERSIAN = ("Persian", "fa")
    PUNJABI = ("Punjabi", "pa")
    PASHTO = ("Pashto", "ps")
    RUSSIAN = ("Russian", "ru")
    ROMANIAN = ("Romanian", "ro")
    SPANISH = ("Spanish", "es")
    SWEDISH = ("Swedish", "sv")
    SLOVAK = ("Slovak", "sk")
    SERBIAN = ("Serbian", "sr")
    SLOVENIAN = ("Slovenian", "sl")
    SWAHILI = ("Swahili", "sw")
    SINHALA = ("Sinhala", "si")
    SHONA = ("Shona", "sn")
    SOMALI = ("Somali", "so")
    SINDHI = ("Sindhi", "sd")
    SANSKRIT = ("Sanskrit", "sa")
    SUNDANESE = ("Sundanese", "su")
    TURKISH = ("Turkish", "tr")
    TAMIL = ("Tamil", "ta")
    THAI = ("Thai", "th")
    TELUGU = ("Telugu", "te")
    TAJIK = ("Tajik", "tg")
    TURKMEN = ("Turkmen", "tk")
    TIBETAN = ("Tibetan", "bo")
    TAGALOG = ("Tagalog", "tl")
    TATAR = ("Tatar", "tt")
    UKRAINIAN = ("Ukrainian", "uk")
    URDU = ("Urdu", "ur")
    UZBEK = ("Uzbek", "uz")
    VIETNAMESE = ("Vietnamese", "vi")
    WELSH = ("Welsh", "cy")
    YORUBA = ("Yoruba", "yo")
    YIDDISH = ("Yiddish", "yi")

    def __init__(self, display_name: str, code: str) -> None:
        self.display_name = display_name
        self.code = code

    @property
    def base_code(self) -> str:
        """ISO code without region suffix."""
        return self.code.split("-")[0]

    @property
    def is_space_delimited(self) -> bool:
        """Whether long captions are wrapped by word count."""
        return self.base_code in SPACE_LANGUAGES

    @property
    def uses_cjk_title(self) -> bool:
        """Whether the default title style is the CJK one."""
        return self in (Language.CHINESE_SIMPLIFIED, Language.CHINESE_TRADITIONAL)

    @classmethod
    def from_name(cls, name: str) -> "Language":
        """Look up a language by display name, member name or ISO code.

        Args:
            name: e.g. "English", "chinese_simplified", "en" or "zh-TW"

        Returns:
            Matching language

        Raises:
            ValueError: If nothing matches
        """
        wanted = name.strip().lower()
        for language in cls:
            if wanted in (
                language.display_name.lower(),
                language.name.lower(),
                language.code.lower(),
            ):
                return language
        raise ValueError(f"Unknown language: {name}")

    @classmethod
    def display_names(cls) -> List[str]:
        """All display names, in declaration order."""
        return [language.display_name for language in cls]
