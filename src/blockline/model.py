"""
Core Block Model Objects

Defines the data structures shared by the parser, serializer and executor:
    - OutputKind / OutputClause (where a result is stored)
    - FormField (declarative form metadata for one block setting)
    - StatementKind (one kind of block: name, arity, semantics)
    - Statement (one parsed block line)

ARCHITECTURAL RULE:
    Statement kinds are values, not subclasses.
    A new block kind is a new StatementKind registered in KINDS;
    the parser and executor are shared by every kind.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple, Union


class OutputKind(Enum):
    """
    Destination partition of a statement result.

    The value is the token written after the arrow.
    """
    VARIABLE = "VAR"
    CAPTURE = "CAP"


@dataclass(frozen=True)
class OutputClause:
    """
    The optional '-> VAR "NAME"' / '-> CAP "NAME"' part of a statement.

    Properties:
        kind: VARIABLE or CAPTURE
        name: Variable name the result is written to (never empty)

    A CAPTURE is a variable flagged as interesting to downstream
    reporting; the value itself is stored the same way.
    """

    kind: OutputKind
    name: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("Output variable name must not be empty")

    @property
    def is_capture(self) -> bool:
        return self.kind is OutputKind.CAPTURE


class FieldControl(Enum):
    """Form controls a host can draw for a block setting."""
    TEXT = "text"
    CHECKBOX = "checkbox"


@dataclass(frozen=True)
class FormField:
    """
    One row of a block's configuration form.

    This replaces attribute decoration on block properties with a plain
    table the host can read. Nothing in this package draws forms.

    Properties:
        attribute: Setting name (e.g. "First")
        control: Control type to draw
        label: Display label
        description: Help text
        default: Value for a freshly created block
    """

    attribute: str
    control: FieldControl
    label: str
    description: str = ""
    default: Union[str, bool] = ""


@dataclass(frozen=True)
class StatementKind:
    """
    One kind of block statement.

    Properties:
        name:
            Statement token, also the default label (e.g. "SUM")

        operand_names:
            Names of the quoted operands, in order. Their count is the
            arity enforced by the parser.

        evaluate:
            Semantic function over the integer operands

        color, light_foreground:
            Host metadata for drawing the block; never parsed or serialized

        fields:
            Form table for the block settings
    """

    name: str
    operand_names: Tuple[str, ...]
    evaluate: Callable[[List[int]], int]
    color: str = "White"
    light_foreground: bool = False
    fields: Tuple[FormField, ...] = ()

    @property
    def arity(self) -> int:
        return len(self.operand_names)

    def get_field(self, attribute: str) -> Optional[FormField]:
        for form_field in self.fields:
            if form_field.attribute == attribute:
                return form_field
        return None

    def default_operands(self) -> List[str]:
        defaults = []
        for name in self.operand_names:
            form_field = self.get_field(name)
            defaults.append(str(form_field.default) if form_field else "")
        return defaults


SUM = StatementKind(
    name="SUM",
    operand_names=("First", "Second"),
    evaluate=sum,
    color="Cyan",
    light_foreground=False,
    fields=(
        FormField("First", FieldControl.TEXT, "First Number", "The first operand", "1"),
        FormField("Second", FieldControl.TEXT, "Second Number", "The second operand", "2"),
        FormField("VariableName", FieldControl.TEXT, "Variable Name", "The output variable name", ""),
        FormField("IsCapture", FieldControl.CHECKBOX, "Is Capture",
                  "Should the output variable be marked as capture?", False),
    ),
)


KINDS: Dict[str, StatementKind] = {}


def register_kind(kind: StatementKind) -> StatementKind:
    """Make a statement kind available to parse_line."""
    KINDS[kind.name] = kind
    return kind


def get_kind(name: str) -> Optional[StatementKind]:
    return KINDS.get(name)


register_kind(SUM)


@dataclass
class Statement:
    """
    One block statement.

    Properties:
        kind:
            The StatementKind this block belongs to

        operands:
            Raw literal operands, unsubstituted. Variable references such
            as "<X>" are kept verbatim until execution.

        label:
            Block label. Defaults to the kind name when not given.

        output:
            Where the result goes, or None when it is not stored

        disabled:
            Carried through parse/serialize; the executor ignores it.
            Whether a disabled block runs at all is the driver's call.

    IMPORTANT:
        The serializer and executor only read a Statement.
        Editing tools may assign fields directly.
    """

    kind: StatementKind
    operands: List[str] = field(default_factory=list)
    label: Optional[str] = None
    output: Optional[OutputClause] = None
    disabled: bool = False

    def __post_init__(self):
        if self.label is None:
            self.label = self.kind.name

    @property
    def has_default_label(self) -> bool:
        return self.label == self.kind.name


def new_statement(kind: StatementKind = SUM) -> Statement:
    """
    Create a block with the defaults from its form table.

    The output clause is only set when the VariableName default is
    non-empty.
    """
    statement = Statement(kind=kind, operands=kind.default_operands())

    name_field = kind.get_field("VariableName")
    if name_field is not None and name_field.default:
        capture_field = kind.get_field("IsCapture")
        is_capture = bool(capture_field.default) if capture_field else False
        statement.output = OutputClause(
            kind=OutputKind.CAPTURE if is_capture else OutputKind.VARIABLE,
            name=str(name_field.default),
        )

    return statement
