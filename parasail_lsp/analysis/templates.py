"""Code skeletons offered when the current line starts a declaration.

Snippet bodies use ``${index:default}`` placeholders. The engine passes them
through untouched; expanding them is the editor's job.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class Template:
    """A parameterized code skeleton.

    Attributes:
        label: Name shown in the completion list.
        trigger: Pattern tested against the whole current line.
        snippet: Body with numbered placeholders.
        description: One-line summary.
    """

    label: str
    trigger: re.Pattern[str]
    snippet: str
    description: str


TEMPLATES: tuple[Template, ...] = (
    Template(
        label="func",
        trigger=re.compile(r"^\s*fun", re.IGNORECASE),
        snippet="func ${1:name}($2) -> ${3:ReturnType} is\n\t${4:-- Implementation}\nend func",
        description="Function declaration template",
    ),
    Template(
        label="type",
        trigger=re.compile(r"^\s*typ", re.IGNORECASE),
        snippet="type ${1:TypeName} is\n\t${2:-- Definition}\nend type",
        description="Type declaration template",
    ),
    Template(
        label="interface",
        trigger=re.compile(r"^\s*int", re.IGNORECASE),
        snippet="interface ${1:InterfaceName} is\n\t${2:-- Operations}\nend interface",
        description="Interface declaration template",
    ),
    Template(
        label="class",
        trigger=re.compile(r"^\s*cla", re.IGNORECASE),
        snippet=(
            "class ${1:ClassName} {\n\t${2:-- Fields}\n\n"
            "\tfunc ${3:New}($4) -> ${5:ClassName} is\n\t\t${6:-- Constructor}\n\tend func\n}"
        ),
        description="Class declaration template",
    ),
    Template(
        label="for",
        trigger=re.compile(r"^\s*for", re.IGNORECASE),
        snippet="for ${1:element} in ${2:collection} loop\n\t${3:-- Loop body}\nend loop",
        description="For-each loop template",
    ),
    Template(
        label="if",
        trigger=re.compile(r"^\s*if", re.IGNORECASE),
        snippet="if ${1:condition} then\n\t${2:-- True branch}\nelse\n\t${3:-- False branch}\nend if",
        description="If-else statement template",
    ),
)


def templates_matching(line_text: str) -> list[Template]:
    """All templates whose trigger matches the line, in catalog order.

    Several templates may match one line; none takes precedence.
    """
    return [t for t in TEMPLATES if t.trigger.search(line_text)]
