"""Static catalog of quiz definitions, one quiz per SOLID article."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from solid_quiz.core.models import QuizDefinition, QuizMeta


class QuizCatalog(Mapping[str, QuizDefinition]):
    """Read-only mapping from quiz name to definition, iterated in insertion order."""

    def __init__(self, definitions: Iterable[QuizDefinition] = ()) -> None:
        self._definitions: dict[str, QuizDefinition] = {}
        for definition in definitions:
            self._validate(definition)
            if definition.name in self._definitions:
                raise ValueError(f"Duplicate quiz name '{definition.name}' in catalog.")
            self._definitions[definition.name] = definition

    def __getitem__(self, name: str) -> QuizDefinition:
        return self._definitions[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"QuizCatalog({list(self._definitions)!r})"

    def names(self) -> tuple[str, ...]:
        return tuple(self._definitions)

    @staticmethod
    def _validate(definition: QuizDefinition) -> None:
        name = definition.name.strip()
        if not name or name != definition.name:
            raise ValueError(f"Invalid quiz name {definition.name!r}.")
        correct = definition.meta.correct_answers
        if not correct:
            raise ValueError(f"Quiz '{name}' must define at least one correct answer.")
        unknown = [answer for answer in correct if answer not in definition.meta.options]
        if unknown:
            raise ValueError(
                f"Quiz '{name}' lists correct answers {unknown} that are not among its options."
            )


DEFAULT_CATALOG = QuizCatalog(
    [
        QuizDefinition(
            name="srp-1",
            meta=QuizMeta(
                title="Which classes have more than one reason to change?",
                correct_answers=("B", "C"),
            ),
        ),
        QuizDefinition(
            name="ocp-1",
            meta=QuizMeta(
                title="Which change extends behaviour without modifying existing code?",
                correct_answers=("A",),
            ),
        ),
        QuizDefinition(
            name="lsp-1",
            meta=QuizMeta(
                title="Which subclass can replace its base class without surprises?",
                correct_answers=("D",),
            ),
        ),
        QuizDefinition(
            name="isp-1",
            meta=QuizMeta(
                title="Which interface forces clients to depend on methods they do not use?",
                correct_answers=("C",),
            ),
        ),
        QuizDefinition(
            name="dip-1",
            meta=QuizMeta(
                title="Which module depends on an abstraction instead of a concrete detail?",
                correct_answers=("B",),
            ),
        ),
    ]
)
