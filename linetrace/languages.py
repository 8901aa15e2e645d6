"""Supported language registry: labels, extensions and starter templates."""

from __future__ import annotations

from pydantic import BaseModel

from . import constants


class LanguageOption(BaseModel):
    value: str
    label: str
    extension: str
    compiled: bool = False
    template: str = ""
    run_command: str = ""
    features: tuple[str, ...] = ()


_ALL_FEATURES = (
    constants.FEATURE_EXECUTION,
    constants.FEATURE_VISUALIZATION,
    constants.FEATURE_TRACING,
)
_COMPILED_FEATURES = (
    constants.FEATURE_EXECUTION,
    constants.FEATURE_VISUALIZATION,
)

LANGUAGE_OPTIONS: tuple[LanguageOption, ...] = (
    LanguageOption(
        value="javascript",
        label="JavaScript",
        extension="js",
        template="""\
// JavaScript Code
function greet(name) {
  return `Hello, ${name}!`;
}

console.log(greet('World'));
""",
        run_command="node",
        features=_ALL_FEATURES,
    ),
    LanguageOption(
        value="python",
        label="Python",
        extension="py",
        template="""\
# Python Code
def greet(name):
    return f"Hello, {name}!"

print(greet("World"))
""",
        run_command="python3",
        features=_ALL_FEATURES,
    ),
    LanguageOption(
        value="java",
        label="Java",
        extension="java",
        compiled=True,
        template="""\
// Java Code
public class Main {
    public static void main(String[] args) {
        System.out.println("Hello, World!");
    }

    public static String greet(String name) {
        return "Hello, " + name + "!";
    }
}
""",
        run_command="javac",
        features=_COMPILED_FEATURES,
    ),
    LanguageOption(
        value="cpp",
        label="C++",
        extension="cpp",
        compiled=True,
        template="""\
// C++ Code
#include <iostream>
#include <string>
using namespace std;

string greet(string name) {
    return "Hello, " + name + "!";
}

int main() {
    cout << greet("World") << endl;
    return 0;
}
""",
        run_command="g++",
        features=_COMPILED_FEATURES,
    ),
    LanguageOption(
        value="c",
        label="C",
        extension="c",
        compiled=True,
        template="""\
// C Code
#include <stdio.h>
#include <string.h>

void greet(char* name) {
    printf("Hello, %s!\\n", name);
}

int main() {
    greet("World");
    return 0;
}
""",
        run_command="gcc",
        features=_COMPILED_FEATURES,
    ),
)

_BY_VALUE: dict[str, LanguageOption] = {opt.value: opt for opt in LANGUAGE_OPTIONS}

SUPPORTED_LANGUAGES: tuple[str, ...] = tuple(_BY_VALUE)


def get_language_config(language: str) -> LanguageOption | None:
    return _BY_VALUE.get(language)


def require_language(language: str) -> LanguageOption:
    """Return the option for *language*.

    Raises ``ValueError`` if *language* is not registered.
    """
    option = _BY_VALUE.get(language)
    if option is None:
        raise ValueError(
            f"Unsupported language: {language!r}. "
            f"Available: {list(SUPPORTED_LANGUAGES)}"
        )
    return option


def get_language_label(language: str) -> str:
    option = get_language_config(language)
    return option.label if option else language


def get_file_extension(language: str) -> str:
    option = get_language_config(language)
    return option.extension if option else "txt"


def get_template(language: str) -> str:
    option = get_language_config(language)
    return option.template if option else ""


def supports_feature(language: str, feature: str) -> bool:
    option = get_language_config(language)
    return option is not None and feature in option.features


def language_for_extension(extension: str) -> str | None:
    """Map a file extension (with or without the dot) to a language value."""
    ext = extension.lstrip(".").lower()
    return next(
        (opt.value for opt in LANGUAGE_OPTIONS if opt.extension == ext),
        None,
    )
