"""
User-facing message catalog (Czech / English).

Status messages follow the selected output language. Help text and error
messages are always shown in both languages, Czech first.
"""

from enum import Enum
from typing import Dict

from . import __version__

REPO_URL = "https://github.com/Tadeas-Jun/czech-keywords"


class Language(str, Enum):
    """Language of status output"""
    CZE = "cze"
    ENG = "eng"


STATUS_MESSAGES: Dict[str, Dict[Language, str]] = {
    "words_loaded": {
        Language.CZE: "Načetl jsem {count} slov z input dokumentu.",
        Language.ENG: "Loaded {count} words from input document.",
    },
    "corpus_loaded": {
        Language.CZE: "Načetl jsem český korpus s {count} slovy.",
        Language.ENG: "Loaded Czech corpus with {count} words.",
    },
    "stop_words_removed": {
        Language.CZE: "Odstranil jsem {count} stop slov ze seznamu.",
        Language.ENG: "Removed {count} stop words from the word list.",
    },
    "short_words_removed": {
        Language.CZE: "Odstranil jsem {count} krátkých slov ze seznamu.",
        Language.ENG: "Removed {count} short words from the word list.",
    },
    "unique_words": {
        Language.CZE: "Načetl jsem {count} unikátních slov z input dokumentu.",
        Language.ENG: "Loaded {count} unique words from input document.",
    },
    "unusual_words_removed": {
        Language.CZE: "Odstraňuji slova s frekvencí méně než {threshold}: "
                      "Odstranil jsem {count} neobvyklých slov ze seznamu frekvencí.",
        Language.ENG: "Cutting off words with an occurrence less than {threshold}: "
                      "Removed {count} unusual words from the frequencies list.",
    },
    "assigning_importance": {
        Language.CZE: "Počítám důležitost až {count} slov. Tento proces může zabrat až pár minut...",
        Language.ENG: "Assigning an importance value to up to {count} words. This might take a while...",
    },
    "no_keywords": {
        Language.CZE: "Žádné ze slov dokumentu se nenachází v korpusu, nenašel jsem žádná klíčová slova.",
        Language.ENG: "None of the document words is in the corpus, no keywords found.",
    },
}

ERROR_MESSAGES: Dict[str, str] = {
    "missing_input": (
        "Pro extrahování slov spusťte program s parametry --input (a --output).\n"
        "To extract keywords, run the code with the --input (and --output) parameters."
    ),
    "input_unreadable": (
        "Zadaný --input soubor nebyl nalezen či se ho nepovedlo otevřít.\n"
        "I could not find or open the --input file."
    ),
    "output_unwritable": (
        "Zadaný --output soubor se nepovedlo otevřít či vytvořit.\n"
        "I could not open or create the --output file."
    ),
    "invalid_language": (
        "Definovaný jazyk (--language) musí být 'cze' nebo 'eng'.\n"
        "The defined --language has to be 'cze' or 'eng'."
    ),
    "corpus_unreadable": (
        "Korpus se nepovedlo načíst.\n"
        "I could not load the corpus."
    ),
    "unknown_options": (
        "Neznámé parametry byly ignorovány: {options}\n"
        "Unknown parameters were ignored: {options}"
    ),
    "invalid_arguments": (
        "Parametry programu se nepovedlo zpracovat.\n"
        "I could not process the program parameters."
    ),
    "invalid_configuration": (
        "Nastavení v proměnných prostředí je neplatné.\n"
        "The configuration in environment variables is invalid."
    ),
    "empty_input": (
        "Po odstranění stop slov a krátkých slov nezůstalo v dokumentu žádné slovo.\n"
        "No words are left in the document after removing stop words and short words."
    ),
}

HELP_TEXT = f"""
czech-keywords je program pro extrahování klíčových slov z českého dokumentu. Používáte verzi programu {__version__}.

Pro extrahování slov spusťte program s parametrem --input (a --output). Dobrovolně můžete přidat i parametr --simplePrint, který
způsobí pouze vypsání samotných klíčových slov; jinak program vypíše i informace o procesu analýzy textu.

Příklad spuštění:
    czech-keywords --input inputText.txt --output keywords.txt --simplePrint --language eng

Spusťte program bez parametru nebo s parametrem --help pro zobrazení této zprávy.

Spusťte program s parametrem --language pro přepínání jazyka výpisových informací mezi češtinou a angličtinou. Parametr může mít hodnoty 'cze' nebo 'eng'.
Bez přidání parametru se automaticky zvolí čeština. Tato nápověda a zprávy s errory se vždy zobrazí v obou jazycích.

Parametrem --corpus lze zvolit jiný soubor korpusu (výchozí: proměnná KEYWORDS_CORPUS_PATH nebo corpus/syn2015_word_utf8.tsv).

Zdrojový kód a uživatelská dokumentace jsou dostupné v projektovém repozitáři:
    {REPO_URL}

-------------------------

czech-keywords is a program used for keyword extraction from Czech documents. You are using version {__version__} of the project.

To extract keywords, run the code with the --input (and --output) parameters. Optionally, you can add the --simplePrint parameter to
only output the keywords themselves; otherwise, the program prints out additional information about the text analysis process.

Example command:
    czech-keywords --input inputText.txt --output keywords.txt --simplePrint --language eng

Run the program without any parameters or with the --help parameter to view this message.

Run the program with the --language parameter to switch the information output language between Czech and English. The parameter can have values
of 'cze' or 'eng'. If no value is specified, the program defaults to Czech. This help message and the error messages will always be displayed
in both languages.

Use --corpus to select another corpus file (default: KEYWORDS_CORPUS_PATH variable or corpus/syn2015_word_utf8.tsv).

You can find the source code and the user documentation in the project repository:
    {REPO_URL}
"""


def status(key: str, language: Language, **values) -> str:
    """Status message in the given language with placeholders filled"""
    return STATUS_MESSAGES[key][language].format(**values)
