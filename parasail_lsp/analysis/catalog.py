"""Static documentation for ParaSail reserved words and standard library symbols.

Both tables are read-only mappings built at import time.
"""

from types import MappingProxyType

KEYWORDS: MappingProxyType[str, str] = MappingProxyType({
    "func": "Defines a function: `func name(params) -> return_type is ... end func`",
    "type": "Defines a type: `type Name is ... end type`",
    "interface": "Declares an interface: `interface Name is ... end interface`",
    "class": "Defines a class: `class Name is ... end class`",
    "operator": "Operator overload: `operator \"=\"(Left: Type, Right: Type) -> Boolean is ...`",
    "package": "Module declaration: `package Name is ... end package`",
    "const": "Constant declaration: `const Name: Type := Value`",
    "var": "Variable declaration: `var Name: Type := Value`",
    "abstract": "Abstract operation: `abstract func Name(...)`",
    "extends": "Inheritance: `class Name extends Parent`",
    "exports": "Visibility control: `exports {Name1, Name2}`",
    "imports": "Dependency: `imports Package::Module`",
    "all": "Wildcard import: `imports Package::Module::all`",
    "new": "Constructor: `var Obj := new Class(...)`",
    "not": "Logical negation: `not Condition`",
    "and": "Logical AND: `Condition1 and Condition2`",
    "or": "Logical OR: `Condition1 or Condition2`",
    "xor": "Logical XOR: `Condition1 xor Condition2`",
    "in": "Membership test: `Element in Collection`",
    "case": "Pattern matching: `case Expression of ... end case`",
    "loop": "Loop construct: `loop ... end loop`",
    "for": "Iteration: `for Elem in Collection loop ... end loop`",
    "while": "Conditional loop: `while Condition loop ... end loop`",
    "if": "Conditional: `if Condition then ... else ... end if`",
    "then": "Conditional clause",
    "else": "Alternative branch",
    "end": "Block termination",
    "is": "Declaration separator",
    "parallel": "Parallel block: `parallel ... end parallel`",
    "forward": "Deferred implementation: `forward func Name(...)`",
    "optional": "Nullable type: `optional Type`",
    "null": "Empty reference",
})

STANDARD_LIBRARY: MappingProxyType[str, str] = MappingProxyType({
    "IO::Print": "Output to console: Print(\"Message\")",
    "Math::Sin": "Sine function: Sin(Radians: Float) -> Float",
    "Containers::Vector": "Resizable array: Vector<Element_Type>",
    "String::Concat": "Concatenate strings: Concat(Left, Right) -> String",
    "File::Open": "Open file: Open(Path: String) -> File_Handle",
    "DateTime::Now": "Current timestamp: Now() -> DateTime",
    "Network::HttpRequest": "HTTP client: HttpRequest(Url: String) -> Response",
    "Crypto::SHA256": "Hash data: SHA256(Data: String) -> Hash",
})

# Case-folded index so lookups are total over KEYWORDS regardless of input case
_KEYWORDS_FOLDED: MappingProxyType[str, str] = MappingProxyType(
    {name.casefold(): doc for name, doc in KEYWORDS.items()}
)


def lookup_keyword(name: str) -> str | None:
    """Return documentation for a reserved word, ignoring case."""
    return _KEYWORDS_FOLDED.get(name.casefold())


def keywords_with_prefix(prefix: str) -> list[str]:
    """Reserved words starting with prefix (case-insensitive), in catalog order."""
    folded = prefix.casefold()
    return [name for name in KEYWORDS if name.casefold().startswith(folded)]


def lookup_library_symbols(substring: str) -> list[tuple[str, str]]:
    """Standard library symbols whose qualified name contains substring.

    Matching ignores case. An empty substring matches every symbol.
    """
    folded = substring.casefold()
    return [
        (name, doc)
        for name, doc in STANDARD_LIBRARY.items()
        if folded in name.casefold()
    ]


def library_namespace(qualified_name: str) -> str:
    """First segment of a qualified name (``IO`` for ``IO::Print``)."""
    return qualified_name.split("::", 1)[0]
