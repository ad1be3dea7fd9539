from __future__ import annotations

from types import MappingProxyType

# Folded (apostrophe-less) spellings are listed only where they are not
# ordinary English words: "were", "ill", "well", "shell", "id", "wed" stay as typed.
CONTRACTIONS = MappingProxyType({
    "i'm": "i am", "im": "i am", "i m": "i am",
    "you're": "you are", "youre": "you are",
    "he's": "he is", "hes": "he is",
    "she's": "she is", "shes": "she is",
    "it's": "it is", "its": "it is",
    "we're": "we are",
    "they're": "they are", "theyre": "they are",
    "isn't": "is not", "isnt": "is not",
    "aren't": "are not", "arent": "are not",
    "wasn't": "was not", "wasnt": "was not",
    "weren't": "were not", "werent": "were not",
    "don't": "do not", "dont": "do not",
    "doesn't": "does not", "doesnt": "does not",
    "didn't": "did not", "didnt": "did not",
    "won't": "will not", "wont": "will not",
    "wouldn't": "would not", "wouldnt": "would not",
    "can't": "cannot", "cant": "cannot",
    "couldn't": "could not", "couldnt": "could not",
    "shouldn't": "should not", "shouldnt": "should not",
    "haven't": "have not", "havent": "have not",
    "hasn't": "has not", "hasnt": "has not",
    "hadn't": "had not", "hadnt": "had not",
    "let's": "let us", "lets": "let us",
    "that's": "that is", "thats": "that is",
    "there's": "there is", "theres": "there is",
    "here's": "here is",
    "what's": "what is", "whats": "what is",
    "who's": "who is", "whos": "who is",
    "i've": "i have", "ive": "i have",
    "you've": "you have", "youve": "you have",
    "we've": "we have", "weve": "we have",
    "they've": "they have", "theyve": "they have",
    "i'd": "i would",
    "you'd": "you would", "youd": "you would",
    "he'd": "he would", "hed": "he would",
    "she'd": "she would",
    "we'd": "we would",
    "they'd": "they would", "theyd": "they would",
    "i'll": "i will",
    "you'll": "you will", "youll": "you will",
    "he'll": "he will",
    "she'll": "she will",
    "we'll": "we will",
    "they'll": "they will", "theyll": "they will",
})

NUMBER_WORDS = MappingProxyType({
    "zero": "0", "one": "1", "two": "2", "three": "3", "four": "4",
    "five": "5", "six": "6", "seven": "7", "eight": "8", "nine": "9",
    "ten": "10", "eleven": "11", "twelve": "12", "thirteen": "13",
    "fourteen": "14", "fifteen": "15", "sixteen": "16", "seventeen": "17",
    "eighteen": "18", "nineteen": "19", "twenty": "20", "thirty": "30",
    "forty": "40", "fifty": "50", "sixty": "60", "seventy": "70",
    "eighty": "80", "ninety": "90", "hundred": "100",
})

_UNITS = ("one", "two", "three", "four", "five", "six", "seven", "eight", "nine")


def _compound_numbers() -> dict[str, str]:
    out: dict[str, str] = {}
    pairs = [("twenty", unit) for unit in _UNITS] + [("thirty", "one"), ("thirty", "two")]
    for tens, unit in pairs:
        digits = str(int(NUMBER_WORDS[tens]) + int(NUMBER_WORDS[unit]))
        out[f"{tens}-{unit}"] = digits
        out[f"{tens} {unit}"] = digits
    return out


# 21-29, 31 and 32, hyphenated and space-separated
COMPOUND_NUMBERS = MappingProxyType(_compound_numbers())

BRITISH_TO_AMERICAN = MappingProxyType({
    # -our / -or
    "colour": "color", "colours": "colors", "coloured": "colored", "colouring": "coloring",
    "favour": "favor", "favours": "favors", "favoured": "favored",
    "favourite": "favorite", "favourites": "favorites",
    "honour": "honor", "honours": "honors", "honoured": "honored", "honouring": "honoring",
    "labour": "labor", "labours": "labors", "laboured": "labored", "labouring": "laboring",
    "neighbour": "neighbor", "neighbours": "neighbors", "neighbourhood": "neighborhood",
    "behaviour": "behavior", "behaviours": "behaviors",
    "humour": "humor", "humours": "humors",
    "flavour": "flavor", "flavours": "flavors",
    "rumour": "rumor", "rumours": "rumors",
    "vapour": "vapor",
    "odour": "odor",
    # -ise / -ize
    "realise": "realize", "realised": "realized", "realising": "realizing",
    "organise": "organize", "organised": "organized", "organising": "organizing",
    "recognise": "recognize", "recognised": "recognized", "recognising": "recognizing",
    "apologise": "apologize", "apologised": "apologized", "apologising": "apologizing",
    "analyse": "analyze", "analysed": "analyzed", "analysing": "analyzing",
    "criticise": "criticize", "criticised": "criticized", "criticising": "criticizing",
    "memorise": "memorize", "memorised": "memorized", "memorising": "memorizing",
    "specialise": "specialize", "specialised": "specialized", "specialising": "specializing",
    # -re / -er
    "centre": "center", "centres": "centers",
    "theatre": "theater", "theatres": "theaters",
    "metre": "meter", "metres": "meters",
    "litre": "liter", "litres": "liters",
    "fibre": "fiber", "fibres": "fibers",
    # -ogue / -og
    "catalogue": "catalog", "catalogues": "catalogs",
    "dialogue": "dialog", "dialogues": "dialogs",
    # doubled consonants
    "travelling": "traveling", "travelled": "traveled", "traveller": "traveler",
    "cancelled": "canceled", "cancelling": "canceling",
    "labelled": "labeled", "labelling": "labeling",
    "modelled": "modeled", "modelling": "modeling",
    "jewellery": "jewelry",
    "fulfil": "fulfill",
    # other
    "grey": "gray",
    "licence": "license",
    "practise": "practice",
    "defence": "defense",
    "offence": "offense",
    "programme": "program", "programmes": "programs",
    "cheque": "check", "cheques": "checks",
    "tyre": "tire", "tyres": "tires",
    "aeroplane": "airplane", "aeroplanes": "airplanes",
    "aluminium": "aluminum",
    "mum": "mom",
    "flat": "apartment",
})

TIME_EXPRESSIONS = (
    "this week", "next week", "last week",
    "this month", "next month", "last month",
    "this year", "next year", "last year",
    "today", "tomorrow", "yesterday",
    "this morning", "this afternoon", "this evening", "tonight",
    "every day", "every week", "every month",
    "right now", "at the moment", "currently",
    "always", "never", "sometimes", "often", "usually",
    "now", "soon", "later",
)

MOVABLE_ADVERBS = frozenset({
    "already", "just", "never", "ever", "always", "still", "yet",
    "also", "even", "only", "probably", "certainly", "definitely",
    "really", "actually", "finally", "suddenly", "quickly", "slowly",
})

GENDERED_SUBJECT_VERBS = (
    "is", "was", "has", "does", "will", "would",
    "can", "could", "should", "must", "might",
)

PERSON_TOKEN = "PERSON"
POSSESSIVE_TOKEN = "THEIR"
REFLEXIVE_TOKEN = "THEMSELF"
