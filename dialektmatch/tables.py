"""Static Swiss-German lookup tables.

All tables are read-only ``MappingProxyType`` views built once at import
time; processors receive them by reference and never mutate them.
Identity entries (dialect word == standard word) are left out: they would
count as dialect hits without changing the text.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType


def _frozen(d: dict[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(d))


_ZH = {
    "isch": "ist",
    "hät": "hat",
    "git": "gibt",
    "chunt": "kommt",
    "gaht": "geht",
    "chönd": "können",
    "wänd": "wollen",
    "söttid": "sollten",
    "müesst": "müssen",
    "chönt": "könnte",
    "wött": "wollen",
    "hei": "haben",
    "si": "sind",
    "öpper": "jemand",
    "öppis": "etwas",
    "nüt": "nichts",
    "allne": "allen",
    "denn": "dann",
    "wäge": "wegen",
    "vo": "von",
    "ohni": "ohne",
    "dezue": "dazu",
    "dörfed": "dürfen",
    "uf": "auf",
    "dur": "durch",
    "näbed": "neben",
    "zwüsche": "zwischen",
    "hinde": "hinten",
    "obe": "oben",
    "unde": "unten",
}

_BE = {
    "isch": "ist",
    "het": "hat",
    "git": "gibt",
    "chunt": "kommt",
    "geit": "geht",
    "chöi": "können",
    "wei": "wollen",
    "sötti": "sollten",
    "müesse": "müssen",
    "chönt": "könnte",
    "wett": "wollen",
    "hei": "haben",
    "si": "sind",
    "öpper": "jemand",
    "öppis": "etwas",
    "nüt": "nichts",
    "allne": "allen",
}

_BS = {
    "isch": "ist",
    "het": "hat",
    "git": "gibt",
    "chunnt": "kommt",
    "goot": "geht",
    "chönd": "können",
    "wänd": "wollen",
    "sötted": "sollten",
    "müend": "müssen",
    "chönnt": "könnte",
    "wött": "wollen",
    "händ": "haben",
    "öbber": "jemand",
    "öbbis": "etwas",
    "nyt": "nichts",
    "allne": "allen",
}

DEFAULT_DIALECT = "ZH"

DIALECT_MAPPINGS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "ZH": _frozen(_ZH),
        "BE": _frozen(_BE),
        "BS": _frozen(_BS),
    }
)

COMMON_SWISS_WORDS: Mapping[str, str] = _frozen(
    {
        # Zahlen
        "eis": "eins",
        "zwöi": "zwei",
        "drü": "drei",
        "drüü": "drei",
        "föif": "fünf",
        "sächs": "sechs",
        "sibe": "sieben",
        "nüün": "neun",
        "zäh": "zehn",
        "drüzäh": "dreizehn",
        "vierzäh": "vierzehn",
        "füfzäh": "fünfzehn",
        "sächzäh": "sechzehn",
        "sibzäh": "siebzehn",
        "achzäh": "achtzehn",
        "nüünzäh": "neunzehn",
        "zwänzg": "zwanzig",
        "drüssg": "dreissig",
        "vierzg": "vierzig",
        "füfzg": "fünfzig",
        "sächzg": "sechzig",
        "sibzg": "siebzig",
        "achzg": "achtzig",
        "nüünzg": "neunzig",
        "tuusig": "tausend",
        # Begrüssung
        "grüezi": "guten tag",
        "grüessech": "guten tag",
        "hoi": "hallo",
        "sali": "hallo",
        "chuchichäschtli": "küchenschrank",
        "chörbli": "körbchen",
        "müesli": "müsli",
        "röschti": "rösti",
        "spätzli": "spätzle",
        "biärli": "bierchen",
        "kafi": "kaffee",
        "güggeli": "hähnchen",
        "wurscht": "wurst",
        "chäs": "käse",
        # Essen & Trinken
        "wy": "wein",
        "gmües": "gemüse",
        "frücht": "frucht",
        "desert": "dessert",
        "nachspys": "nachtisch",
        "schoggi": "schokolade",
        "guezi": "kekse",
        "chueche": "kuchen",
        # Tätigkeiten
        "luege": "schauen",
        "säge": "sagen",
        "mache": "machen",
        "tue": "tun",
        "gä": "geben",
        "nä": "nehmen",
        "bringe": "bringen",
        "hole": "holen",
        "kaufe": "kaufen",
        "zahle": "bezahlen",
        "bestelle": "bestellen",
        "reserviere": "reservieren",
        "aaruefe": "anrufen",
        "schicke": "schicken",
        "sende": "senden",
        # Fragen
        "wär": "wer",
        "wänn": "wann",
        "wieso": "warum",
        "worum": "warum",
        "wievill": "wieviel",
        # Redewendungen
        "excusé": "entschuldigung",
        "merci": "danke",
        "tank": "danke",
        "gern gscheh": "gern geschehen",
        "bis spöter": "bis später",
        "uf widerluege": "auf wiedersehen",
        "adieu": "auf wiedersehen",
        # Zeit
        "hüt": "heute",
        "morn": "morgen",
        "übermorge": "übermorgen",
        "geschter": "gestern",
        "vorgeschter": "vorgestern",
        "spöter": "später",
        "früeh": "früh",
        "spat": "spät",
        "am morge": "am morgen",
        "am abe": "am abend",
        "i de nacht": "in der nacht",
        # Geld
        "franke": "franken",
        "stutz": "franken",
        "füferli": "fünf rappen",
        "zähnerli": "zehn rappen",
        "zwänzgerli": "zwanzig rappen",
        "füfzgerli": "fünfzig rappen",
        # Orte
        "hei": "zuhause",
        "dehei": "zuhause",
        "daheim": "zuhause",
        "ume": "herum",
        "dete": "dort",
        "dört": "dort",
        "do": "hier",
        "det": "dort",
    }
)

# Applied as literal substrings, after the word tables.
PHONETIC_REPLACEMENTS: Mapping[str, str] = _frozen(
    {
        "ää": "ä",
        "öö": "ö",
        "üü": "ü",
        "ii": "i",
        "uu": "u",
        "oo": "o",
        "ee": "e",
        "aa": "a",
    }
)

RESTAURANT_TERMS: Mapping[str, str] = _frozen(
    {
        "reservierig": "reservierung",
        "bestellig": "bestellung",
        "rächnig": "rechnung",
        "zahle": "bezahlen",
        "trinkgäld": "trinkgeld",
        "choch": "koch",
        "chöchin": "köchin",
        "chund": "kunde",
        "bsuch": "besuch",
        "bsucher": "besucher",
        "gsellschaft": "gesellschaft",
        "lüt": "leute",
        "mänsch": "mensch",
        "tagesmenu": "tagesmenü",
        "vorspyse": "vorspeise",
        "nachspyse": "nachspeise",
        "apéro": "aperitif",
    }
)


def supported_dialects() -> list[str]:
    return list(DIALECT_MAPPINGS.keys())
