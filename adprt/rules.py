"""Grammar production sets built while specialising a grammar to a shape."""

from dataclasses import dataclass, field


@dataclass
class Rules:
    """Productions grouped by nonterminal, together with the shape they cover."""

    shape: str = ""
    signature_name: str = ""
    axiom_name: str = ""
    productions: dict = field(default_factory=dict)
    is_empty: bool = False

    @classmethod
    def empty(cls):
        return cls(is_empty=True)

    def insert_production(self, nt, rhs):
        """Add the alternative ``rhs`` to nonterminal ``nt``."""
        self.productions.setdefault(nt, set()).add(rhs)

    def append_shape(self, y):
        """Append ``y`` to the shape, fusing a doubled unpaired stretch '_'."""
        if not self.shape:
            self.shape = y
        elif y and self.shape.endswith("_") and y.startswith("_"):
            self.shape += y[1:]
        else:
            self.shape += y

    def to_text(self):
        """Render the productions as grammar source."""
        lines = [
            f"grammar grmmr uses {self.signature_name} "
            f"(axiom = {self.axiom_name}) {{\n"
        ]
        for nt in sorted(self.productions):
            alternatives = " | ".join(sorted(self.productions[nt]))
            lines.append(f"  {nt} = {alternatives} # h;\n")
        lines.append("}")
        return "".join(lines)

    def __str__(self):
        return "E" if self.is_empty else self.to_text()

    def __add__(self, other):
        if not isinstance(other, Rules):
            return NotImplemented
        productions = {nt: set(rhs) for nt, rhs in self.productions.items()}
        for nt, alternatives in other.productions.items():
            productions.setdefault(nt, set()).update(alternatives)
        return Rules(
            shape=self.shape + other.shape,
            signature_name=self.signature_name,
            axiom_name=self.axiom_name,
            productions=productions,
            is_empty=self.is_empty,
        )


class RuleNamer:
    """Hands out stable generated names for (rule, shape) pairs."""

    def __init__(self):
        self._mapping = {}

    def name(self, rule, shape):
        """Return the generated name for ``rule`` specialised to ``shape``."""
        key = f"{rule}#{shape}"
        if key not in self._mapping:
            self._mapping[key] = f"auto_gen_rule_{len(self._mapping)}"
        return self._mapping[key]


def rule_name_debug(rule, shape):
    """Return a readable name for ``rule`` specialised to ``shape``."""
    return f"{rule}_{shape}"


def merge(rules_list):
    """Union all productions; the shape is that of the last rule set."""
    result = Rules()
    shape = ""
    for rules in rules_list:
        shape = rules.shape
        result = result + rules
    result.shape = shape
    return result


def group_by_shape(rules_list):
    """Combine rule sets keyed by their shape, ordered by shape."""
    by_shape = {}
    for rules in rules_list:
        by_shape[rules.shape] = by_shape.get(rules.shape, Rules()) + rules
    return [by_shape[shape] for shape in sorted(by_shape)]


def match_string(seq, i, j, text):
    """Tell whether ``seq[i:j]`` equals ``text`` exactly."""
    if j - i != len(text):
        return False
    return all(seq[i + pos] == ch for pos, ch in enumerate(text))