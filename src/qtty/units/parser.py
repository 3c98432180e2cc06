from functools import lru_cache
from typing import Tuple, Union

from typing import TYPE_CHECKING

from qtty.core.errors import UnknownUnitError
from qtty.core.unit import Per

if TYPE_CHECKING:
    from qtty.core.unit import Unit
    from qtty.units.registry import UnitsRegistry

# --- Plan node types ------------------------------------------------
# ("name", <str>, None)
# ("div", <plan>, <plan>)
Plan = Tuple[str, Union[str, "Plan"], Union["Plan", None]]

_DELIMITERS = frozenset("/()")

# ---------------- Parser that builds a PLAN (no registry lookups!) ----------------
class _UnitExprParser:
    """
    Grammar (division only, left-associative):
      expr   := factor ('/' factor)*
      factor := NAME | '(' expr ')'
      NAME   := one or more characters other than whitespace, '/', '(' and ')'

    NAME is deliberately permissive so symbols such as "M☉" parse.
    """
    def __init__(self, text: str):
        self.s = text
        self.n = len(text)
        self.i = 0

    def parse(self) -> Plan:
        plan = self._parse_expr()
        self._skip_ws()
        if self.i != self.n:
            raise ValueError(f"Unexpected trailing input at {self.i}: {self.s[self.i:self.i+10]!r}")
        return plan

    # expr := factor ('/' factor)*
    def _parse_expr(self) -> Plan:
        left = self._parse_factor()
        while self._peek('/'):
            self._eat('/')
            right = self._parse_factor()
            left = ("div", left, right)
        return left

    # factor := NAME | '(' expr ')'
    def _parse_factor(self) -> Plan:
        self._skip_ws()
        if self._peek('('):
            self._eat('(')
            val = self._parse_expr()
            self._eat(')')
            return val
        name = self._parse_name()
        if not name:
            ch = self.s[self.i:self.i+1]
            raise ValueError(f"Expected unit name or '(' at {self.i}, got {ch!r}")
        return ("name", name, None)

    # ---- token helpers ----
    def _parse_name(self):
        self._skip_ws()
        i0 = self.i
        while self.i < self.n and not (self.s[self.i].isspace() or self.s[self.i] in _DELIMITERS):
            self.i += 1
        return self.s[i0:self.i] or None

    def _skip_ws(self):
        s, n, i = self.s, self.n, self.i
        while i < n and s[i].isspace():
            i += 1
        self.i = i

    def _peek(self, tok: str) -> bool:
        self._skip_ws()
        return self.i < self.n and self.s[self.i] == tok

    def _eat(self, tok: str):
        if not self._peek(tok):
            got = self.s[self.i:self.i+len(tok)]
            raise ValueError(f"Expected {tok!r} at {self.i}, got {got!r}")
        self.i += len(tok)

# ---------------- Evaluation of a plan against a given registry ----------------
def _eval_plan(plan: Plan, reg: "UnitsRegistry") -> "Unit":
    kind = plan[0]
    if kind == "name":
        name = plan[1]
        try:
            return reg.get(name)  # late binding to the provided registry
        except ValueError as e:
            raise UnknownUnitError(f"Unknown unit '{name}': {e}") from None
    elif kind == "div":
        left = _eval_plan(plan[1], reg)
        right = _eval_plan(plan[2], reg)
        return Per(left, right)
    else:
        raise RuntimeError(f"Invalid plan node: {plan!r}")

# ---------------- Public API with caching-safe compilation ----------------
# Cache the *compiled plan* only. Safe across registries because there's no bound objects inside.
@lru_cache(maxsize=4096)
def _compile_unit_expr(expr: str) -> Plan:
    # products and powers are outside the algebra
    disallowed = set('*^+,;=')
    if any(c in disallowed for c in expr):
        raise ValueError("Only '/', parentheses and unit names are allowed in unit expressions.")
    return _UnitExprParser(expr).parse()

def extract_unit_expr(expr: str, reg: "UnitsRegistry") -> "Unit":
    """
    Parser for composite unit expressions like 'Km/sec' or 'm/(m/sec)'.

    Caching-safety:
      * We cache a compiled syntax plan keyed by `expr` only (no registry state).
      * Evaluation binds names to units from the *provided* `reg` at call time.

    Returns:
      A `Per` unit for expressions containing '/', otherwise whatever `reg.get()`
      returns for the single name.

    Raises:
      ValueError on malformed expressions, `UnknownUnitError` for unknown names.
    """
    plan = _compile_unit_expr(expr)
    return _eval_plan(plan, reg)
