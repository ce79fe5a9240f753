"""Curated per-language, per-topic content used when a lesson must be synthesized.

Both tables are ordered lists of ``(language, predicate, content)`` rows
evaluated top to bottom; the first row whose language matches and whose
predicate accepts the lower-cased topic wins. Predicates are plain substring
tests, so row order is significant: the topic table checks "random" before
"variable" while the exercise table checks variables first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .lesson_types import CodeExample, Language

TopicPredicate = Callable[[str], bool]


def topic_contains(*keywords: str) -> TopicPredicate:
    """Predicate accepting a lower-cased topic containing any of *keywords*."""

    def _predicate(topic_lower: str) -> bool:
        return any(keyword in topic_lower for keyword in keywords)

    return _predicate


_RANDOM = topic_contains("random")
_VARIABLES = topic_contains("variable", "mutability")
_CONTROL_FLOW = topic_contains("control flow", "controlflow", "condition", "if", "else")


@dataclass(frozen=True)
class TopicContent:
    syntax_guide: str
    examples: tuple[CodeExample, ...]


@dataclass(frozen=True)
class ExerciseTemplate:
    description: str
    hints: tuple[str, ...]
    example_output: str


CuratedRow = tuple[Language, TopicPredicate, TopicContent]
ExerciseRow = tuple[Language, TopicPredicate, ExerciseTemplate]


CURATED_TOPICS: tuple[CuratedRow, ...] = (
    (
        Language.RUST,
        _RANDOM,
        TopicContent(
            syntax_guide=(
                "To generate random numbers in Rust, use the `rand` crate. Use "
                "`use rand::Rng;` and `let mut rng = rand::thread_rng();` to create "
                "a random number generator. Generate random numbers with "
                "`rng.gen_range(1..=100)` for a range, or `rng.gen::<i32>()` for a "
                "random integer."
            ),
            examples=(
                CodeExample(
                    code=(
                        "use rand::Rng;\n\nfn main() {\n"
                        "    let mut rng = rand::thread_rng();\n"
                        "    let random_num = rng.gen_range(1..=100);\n"
                        '    println!("Random number: {}", random_num);\n}'
                    ),
                    explanation=(
                        "This example shows how to generate a random number between "
                        "1 and 100 using the rand crate. The rand dependency will be "
                        "automatically added to Cargo.toml when you run your code."
                    ),
                ),
                CodeExample(
                    code=(
                        "use rand::Rng;\n\nfn main() {\n"
                        "    let mut rng = rand::thread_rng();\n"
                        "    let random_float = rng.gen::<f64>();\n"
                        '    println!("Random float: {}", random_float);\n}'
                    ),
                    explanation=(
                        "This example shows how to generate a random float using "
                        "gen::<f64>(). This generates a random floating-point number "
                        "between 0.0 and 1.0."
                    ),
                ),
            ),
        ),
    ),
    (
        Language.RUST,
        _VARIABLES,
        TopicContent(
            syntax_guide=(
                "In Rust, declare variables with `let`. By default, variables are "
                "immutable. Use `let mut` to make them mutable. For example: "
                "`let x = 5;` creates an immutable variable, while `let mut y = 5;` "
                "creates a mutable one. Attempting to modify an immutable variable "
                "will cause a compile error."
            ),
            examples=(
                CodeExample(
                    code=(
                        'fn main() {\n    let name = "Alice";\n'
                        '    println!("Hello, {}!", name);\n}'
                    ),
                    explanation=(
                        "This declares an immutable variable `name` and prints it. "
                        "The variable cannot be changed after declaration."
                    ),
                ),
                CodeExample(
                    code=(
                        "fn main() {\n    let mut count = 0;\n    count += 1;\n"
                        '    println!("Count: {}", count);\n}'
                    ),
                    explanation=(
                        "This example shows a mutable variable using `let mut`. The "
                        "variable can be modified after declaration."
                    ),
                ),
            ),
        ),
    ),
    (
        Language.RUST,
        _CONTROL_FLOW,
        TopicContent(
            syntax_guide=(
                "Control flow in Rust uses `if`, `else if`, and `else` statements. "
                "The condition must be a boolean expression. You can also use "
                "`match` for pattern matching. For example: `if x > 5 { "
                'println!("Greater"); } else { println!("Less or equal"); }`'
            ),
            examples=(
                CodeExample(
                    code=(
                        "fn main() {\n    let number = 7;\n    if number > 5 {\n"
                        '        println!("The number is greater than 5");\n'
                        "    } else {\n"
                        '        println!("The number is 5 or less");\n    }\n}'
                    ),
                    explanation=(
                        "This example demonstrates a basic if-else statement that "
                        "checks if a number is greater than 5."
                    ),
                ),
                CodeExample(
                    code=(
                        "fn main() {\n    let score = 85;\n    if score >= 90 {\n"
                        '        println!("Grade: A");\n'
                        "    } else if score >= 80 {\n"
                        '        println!("Grade: B");\n    } else {\n'
                        '        println!("Grade: C");\n    }\n}'
                    ),
                    explanation=(
                        "This example shows an if-else-if chain with multiple "
                        "conditions to determine a grade based on score."
                    ),
                ),
            ),
        ),
    ),
    (
        Language.JAVASCRIPT,
        _RANDOM,
        TopicContent(
            syntax_guide=(
                "In JavaScript, use `Math.random()` to generate a random number "
                "between 0 and 1. Multiply by a range and use `Math.floor()` to get "
                "integers. For example: `Math.floor(Math.random() * 100) + 1` "
                "generates a number between 1 and 100."
            ),
            examples=(
                CodeExample(
                    code=(
                        "const randomNum = Math.floor(Math.random() * 100) + 1;\n"
                        "console.log(`Random number: ${randomNum}`);"
                    ),
                    explanation=(
                        "This generates a random integer between 1 and 100 using "
                        "Math.random()."
                    ),
                ),
                CodeExample(
                    code=(
                        "function getRandomInRange(min, max) {\n"
                        "    return Math.floor(Math.random() * (max - min + 1)) + min;\n"
                        "}\nconst num = getRandomInRange(10, 20);\n"
                        "console.log(`Random number between 10 and 20: ${num}`);"
                    ),
                    explanation=(
                        "This example shows a reusable function to generate random "
                        "numbers within a custom range."
                    ),
                ),
            ),
        ),
    ),
    (
        Language.JAVASCRIPT,
        _CONTROL_FLOW,
        TopicContent(
            syntax_guide=(
                "Control flow in JavaScript uses `if`, `else if`, and `else` "
                "statements. Conditions can be any expression that evaluates to a "
                "truthy or falsy value. For example: `if (x > 5) { "
                "console.log('Greater'); } else { console.log('Less or equal'); }`"
            ),
            examples=(
                CodeExample(
                    code=(
                        "const number = 7;\nif (number > 5) {\n"
                        "    console.log('The number is greater than 5');\n"
                        "} else {\n    console.log('The number is 5 or less');\n}"
                    ),
                    explanation=(
                        "This example demonstrates a basic if-else statement that "
                        "checks if a number is greater than 5."
                    ),
                ),
                CodeExample(
                    code=(
                        "const age = 18;\nif (age >= 18) {\n"
                        "    console.log('You are an adult');\n"
                        "} else if (age >= 13) {\n"
                        "    console.log('You are a teenager');\n} else {\n"
                        "    console.log('You are a child');\n}"
                    ),
                    explanation=(
                        "This example shows an if-else-if chain with multiple "
                        "conditions to categorize age groups."
                    ),
                ),
            ),
        ),
    ),
    (
        Language.CPP,
        _RANDOM,
        TopicContent(
            syntax_guide=(
                "In C++, include `<random>` and `<ctime>`. Use `std::mt19937` for "
                "the random number generator, seed it with `std::random_device{}()`, "
                "and use `std::uniform_int_distribution<>` to generate numbers in a "
                "range. For example: `std::uniform_int_distribution<> dis(1, 100);` "
                "then `dis(gen)` to get a random number."
            ),
            examples=(
                CodeExample(
                    code=(
                        "#include <iostream>\n#include <random>\n\nint main() {\n"
                        "    std::random_device rd;\n    std::mt19937 gen(rd());\n"
                        "    std::uniform_int_distribution<> dis(1, 100);\n"
                        "    int random_num = dis(gen);\n"
                        '    std::cout << "Random number: " << random_num << std::endl;\n'
                        "    return 0;\n}"
                    ),
                    explanation=(
                        "This example shows how to generate a random number between "
                        "1 and 100 using C++'s random library."
                    ),
                ),
                CodeExample(
                    code=(
                        "#include <iostream>\n#include <random>\n\nint main() {\n"
                        "    std::random_device rd;\n    std::mt19937 gen(rd());\n"
                        "    std::uniform_real_distribution<double> dis(0.0, 1.0);\n"
                        "    double random_float = dis(gen);\n"
                        '    std::cout << "Random float: " << random_float << std::endl;\n'
                        "    return 0;\n}"
                    ),
                    explanation=(
                        "This example shows how to generate a random floating-point "
                        "number between 0.0 and 1.0 using uniform_real_distribution."
                    ),
                ),
            ),
        ),
    ),
    (
        Language.CPP,
        _CONTROL_FLOW,
        TopicContent(
            syntax_guide=(
                "Control flow in C++ uses `if`, `else if`, and `else` statements. "
                "Conditions must evaluate to a boolean value. For example: "
                '`if (x > 5) { std::cout << "Greater"; } else { '
                'std::cout << "Less or equal"; }`'
            ),
            examples=(
                CodeExample(
                    code=(
                        "#include <iostream>\n\nint main() {\n    int number = 7;\n"
                        "    if (number > 5) {\n"
                        '        std::cout << "The number is greater than 5" << std::endl;\n'
                        "    } else {\n"
                        '        std::cout << "The number is 5 or less" << std::endl;\n'
                        "    }\n    return 0;\n}"
                    ),
                    explanation=(
                        "This example demonstrates a basic if-else statement that "
                        "checks if a number is greater than 5."
                    ),
                ),
                CodeExample(
                    code=(
                        "#include <iostream>\n\nint main() {\n"
                        "    int temperature = 25;\n    if (temperature > 30) {\n"
                        '        std::cout << "It\'s hot" << std::endl;\n'
                        "    } else if (temperature > 20) {\n"
                        '        std::cout << "It\'s warm" << std::endl;\n'
                        "    } else {\n"
                        '        std::cout << "It\'s cool" << std::endl;\n'
                        "    }\n    return 0;\n}"
                    ),
                    explanation=(
                        "This example shows an if-else-if chain with multiple "
                        "conditions to categorize temperature ranges."
                    ),
                ),
            ),
        ),
    ),
)


FALLBACK_EXERCISES: tuple[ExerciseRow, ...] = (
    (
        Language.RUST,
        _VARIABLES,
        ExerciseTemplate(
            description=(
                "Declare a variable in Rust. Use `let` to create an immutable "
                "variable with a value, then print it using `println!()`. For "
                "example, declare a variable `name` with your name and print it."
            ),
            hints=(
                "Use `let variable_name = value;` to declare a variable",
                'Use `println!("text {}", variable_name);` to print the variable',
            ),
            example_output="Your name",
        ),
    ),
    (
        Language.JAVASCRIPT,
        _VARIABLES,
        ExerciseTemplate(
            description=(
                "Declare a variable in JavaScript using `let`, `const`, or `var`. "
                "Assign it a value and print it using `console.log()`."
            ),
            hints=(
                "Use `let variableName = value;` to declare a variable",
                "Use `console.log(variableName);` to print it",
            ),
            example_output="The value of your variable",
        ),
    ),
    (
        Language.CPP,
        _VARIABLES,
        ExerciseTemplate(
            description=(
                "Declare a variable in C++ with a type and value, then print it "
                "using `cout`."
            ),
            hints=(
                "Use `type variableName = value;` to declare a variable",
                "Use `std::cout << variableName << std::endl;` to print it",
            ),
            example_output="The value of your variable",
        ),
    ),
    (
        Language.RUST,
        _RANDOM,
        ExerciseTemplate(
            description=(
                "Generate a random number in Rust using the `rand` crate. Use "
                "`rand::Rng` and generate a random number between 1 and 100, then "
                "print it."
            ),
            hints=(
                "Use `use rand::Rng;` to import the Rng trait",
                "Use `let mut rng = rand::thread_rng();` to create a generator",
                "Use `rng.gen_range(1..=100)` to generate a number",
            ),
            example_output="Random number between 1 and 100: 42",
        ),
    ),
    (
        Language.JAVASCRIPT,
        _RANDOM,
        ExerciseTemplate(
            description=(
                "Generate a random number in JavaScript using `Math.random()`. "
                "Generate a number between 1 and 100 and print it."
            ),
            hints=(
                "Use `Math.random()` to get a number between 0 and 1",
                "Multiply by 100 and use `Math.floor()` to get an integer",
            ),
            example_output="Random number between 1 and 100: 42",
        ),
    ),
    (
        Language.CPP,
        _RANDOM,
        ExerciseTemplate(
            description=(
                "Generate a random number in C++ using `<random>`. Generate a "
                "number between 1 and 100 and print it."
            ),
            hints=(
                "Include `<random>` header",
                "Use `std::mt19937` and `std::uniform_int_distribution`",
            ),
            example_output="Random number between 1 and 100: 42",
        ),
    ),
)


def _first_match(rows, language: Language, topic: str):
    topic_lower = topic.lower()
    for row_language, predicate, content in rows:
        if row_language == language and predicate(topic_lower):
            return content
    return None


def lookup_topic_content(language: Language, topic: str) -> TopicContent | None:
    """Curated syntax guide and examples for *topic*, first match wins."""
    return _first_match(CURATED_TOPICS, language, topic)


def lookup_exercise_template(language: Language, topic: str) -> ExerciseTemplate:
    """Fallback exercise for *topic*; a generic template when nothing matches."""
    template = _first_match(FALLBACK_EXERCISES, language, topic)
    if template is not None:
        return template
    return ExerciseTemplate(
        description=(
            f"Write code in {language.display_name} to demonstrate your "
            f"understanding of {topic}. Refer to the explanations and examples above."
        ),
        hints=(
            "Review the code examples above",
            "Start with a simple implementation",
        ),
        example_output=f"Output demonstrating {topic}",
    )
