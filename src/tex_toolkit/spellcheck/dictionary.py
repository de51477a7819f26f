"""
Module: spellcheck.dictionary

Purpose:
    Fixed misspelling -> correction tables used by the spell checker,
    plus the case-matching rule applied to every suggestion.

Key Functions:
    - lookup(): Case-insensitive direct correction lookup
    - correct_spellings(): Distinct correction values, in table order
    - match_case(): Re-capitalize a suggestion to follow a token

Used By:
    - spellcheck.checker
    - spellcheck.suggestions
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

# General English errors
COMMON_MISSPELLINGS: Dict[str, str] = {
    "teh": "the",
    "hte": "the",
    "adn": "and",
    "nad": "and",
    "taht": "that",
    "waht": "what",
    "wiht": "with",
    "whit": "with",
    "fo": "of",
    "ot": "to",
    "ti": "it",
    "si": "is",
    "ont": "not",
    "cna": "can",
    "jsut": "just",
    "ahve": "have",
    "hvae": "have",
    "knwo": "know",
    "konw": "know",
    "tiem": "time",
    "thier": "their",
    "theri": "their",
    "becuase": "because",
    "beacuse": "because",
    "recieve": "receive",
    "occured": "occurred",
    "occurence": "occurrence",
    "definately": "definitely",
    "seperate": "separate",
    "begining": "beginning",
    "untill": "until",
    "accomodate": "accommodate",
    "accross": "across",
    "apparant": "apparent",
    "arguement": "argument",
    "basicly": "basically",
    "beleive": "believe",
    "calender": "calendar",
    "catagory": "category",
    "cemetary": "cemetery",
    "collegue": "colleague",
    "comming": "coming",
    "commitee": "committee",
    "concious": "conscious",
    "copywrite": "copyright",
    "dissapear": "disappear",
    "dissapoint": "disappoint",
    "embarass": "embarrass",
    "enviroment": "environment",
    "existance": "existence",
    "experiance": "experience",
    "familar": "familiar",
    "finaly": "finally",
    "foriegn": "foreign",
    "fourty": "forty",
    "freind": "friend",
    "goverment": "government",
    "grammer": "grammar",
    "gaurd": "guard",
    "happend": "happened",
    "harrass": "harass",
    "hieght": "height",
    "humourous": "humorous",
    "immediatly": "immediately",
    "independant": "independent",
    "inteligence": "intelligence",
    "knowlege": "knowledge",
    "liason": "liaison",
    "libary": "library",
    "lisence": "license",
    "maintainance": "maintenance",
    "manuever": "maneuver",
    "medeval": "medieval",
    "millenium": "millennium",
    "minature": "miniature",
    "mischevious": "mischievous",
    "neccessary": "necessary",
    "noticable": "noticeable",
    "occassion": "occasion",
    "occurrance": "occurrence",
    "paralell": "parallel",
    "parliment": "parliament",
    "persistant": "persistent",
    "personel": "personnel",
    "posession": "possession",
    "prefered": "preferred",
    "privelege": "privilege",
    "professer": "professor",
    "pronounciation": "pronunciation",
    "publically": "publicly",
    "realy": "really",
    "reccomend": "recommend",
    "refered": "referred",
    "relevent": "relevant",
    "religous": "religious",
    "resistence": "resistance",
    "responsability": "responsibility",
    "rythm": "rhythm",
    "saftey": "safety",
    "secratary": "secretary",
    "sentance": "sentence",
    "sieze": "seize",
    "similer": "similar",
    "succesful": "successful",
    "supercede": "supersede",
    "suprise": "surprise",
    "tecnique": "technique",
    "temperture": "temperature",
    "tommorrow": "tomorrow",
    "tounge": "tongue",
    "truely": "truly",
    "twelth": "twelfth",
    "tyrany": "tyranny",
    "underate": "underrate",
    "usefull": "useful",
    "vaccum": "vacuum",
    "vegatable": "vegetable",
    "wierd": "weird",
    "wellfare": "welfare",
    "wether": "whether",
    "writting": "writing",
    "yeild": "yield",
}

# Academic and mathematical terminology
ACADEMIC_MISSPELLINGS: Dict[str, str] = {
    "equasion": "equation",
    "theorm": "theorem",
    "theorom": "theorem",
    "mathmatics": "mathematics",
    "calculas": "calculus",
    "algebre": "algebra",
    "geometery": "geometry",
    "trigonametry": "trigonometry",
    "coefficent": "coefficient",
    "derivitive": "derivative",
    "intergral": "integral",
    "matrics": "matrix",
    "determinat": "determinant",
    "polynominal": "polynomial",
    "algorithim": "algorithm",
    "assymetric": "asymmetric",
    "hypothisis": "hypothesis",
    "analyisis": "analysis",
    "symettric": "symmetric",
    "orthagonal": "orthogonal",
    "parrallel": "parallel",
    "perpindicular": "perpendicular",
    "statistcs": "statistics",
    "probabilty": "probability",
    "varience": "variance",
    "covarience": "covariance",
    "correlaton": "correlation",
    "regrssion": "regression",
    "convergance": "convergence",
    "divergance": "divergence",
}

ALL_MISSPELLINGS: Dict[str, str] = {**COMMON_MISSPELLINGS, **ACADEMIC_MISSPELLINGS}


def lookup(word: str, table: Mapping[str, str] = ALL_MISSPELLINGS) -> Optional[str]:
    """Return the lowercase correction for a word, or None if unknown."""
    return table.get(word.lower())


def correct_spellings(table: Mapping[str, str] = ALL_MISSPELLINGS) -> List[str]:
    """Distinct correction values, in first-seen table order."""
    return list(dict.fromkeys(table.values()))


def match_case(token: str, suggestion: str) -> str:
    """
    Capitalize the suggestion's first letter if the token's is uppercase.

    The rest of the suggestion is left untouched.

    Example:
        >>> match_case("Teh", "the")
        'The'
        >>> match_case("teh", "the")
        'the'
    """
    if token and suggestion and token[0].isupper():
        return suggestion[0].upper() + suggestion[1:]
    return suggestion
