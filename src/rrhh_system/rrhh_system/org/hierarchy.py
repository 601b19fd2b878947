"""Org chart tree built from the flat employee list.

Employees reference their boss through ``supervisor_id``. The builder is a
two-pass, map-based linker: it never recurses, so bad data cannot blow the
stack. Reporting cycles are refused on write (``find_supervisor_cycle``);
rows already stored in a cycle are promoted to roots so they stay visible.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..core.constants import DEFAULT_COMPANY_NAME


@dataclass
class OrgNode:
    node_id: Optional[int]
    name: str
    job_title: str = ""
    dept_name: str = ""
    photo_url: Optional[str] = None
    initials: str = ""
    is_root: bool = False
    children: list["OrgNode"] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.node_id,
            "name": self.name,
            "job_title": self.job_title,
            "dept_name": self.dept_name,
            "photo_url": self.photo_url,
            "initials": self.initials,
            "is_root": self.is_root,
            "children": [c.to_dict() for c in self.children],
        }

    def walk(self) -> Iterable["OrgNode"]:
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


def _attr(obj: Any, name: str, default: Any = None) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)


def _to_node(emp: Any) -> OrgNode:
    first = _attr(emp, "first_name") or ""
    last = _attr(emp, "last_name") or ""
    return OrgNode(
        node_id=_attr(emp, "employee_id", _attr(emp, "id")),
        name=f"{first} {last}".strip(),
        job_title=_attr(emp, "job_name") or "Sin Cargo",
        dept_name=_attr(emp, "department_name") or "Sin Departamento",
        photo_url=_attr(emp, "photo_url"),
        initials=f"{first[:1]}{last[:1]}".upper(),
    )


def _parent_map(employees: Sequence[Any]) -> dict[int, Optional[int]]:
    out: dict[int, Optional[int]] = {}
    for e in employees:
        emp_id = _attr(e, "employee_id", _attr(e, "id"))
        out[emp_id] = _attr(e, "supervisor_id")
    return out


def _cycle_members(parents: Mapping[int, Optional[int]]) -> set[int]:
    """Ids that sit on a supervisor loop; each id is visited once."""
    members: set[int] = set()
    done: set[int] = set()
    for start in parents:
        if start in done:
            continue
        path: list[int] = []
        on_path: dict[int, int] = {}
        current: Optional[int] = start
        while current is not None and current in parents and current not in done:
            if current in on_path:
                members.update(path[on_path[current]:])
                break
            on_path[current] = len(path)
            path.append(current)
            current = parents[current]
        done.update(path)
    return members


def find_supervisor_cycle(
    employees: Sequence[Any],
    employee_id: Optional[int],
    supervisor_id: Optional[int],
) -> Optional[list[int]]:
    """Return the chain that would loop if employee_id reported to supervisor_id.

    Returns None when the assignment is safe (including new employees, which
    nobody can report to yet).
    """

    if supervisor_id is None or employee_id is None:
        return None
    if supervisor_id == employee_id:
        return [employee_id, employee_id]

    parents = _parent_map(employees)
    parents[employee_id] = supervisor_id

    chain = [employee_id]
    seen = {employee_id}
    current: Optional[int] = supervisor_id
    while current is not None and current in parents:
        chain.append(current)
        if current == employee_id:
            return chain
        if current in seen:
            # Loop elsewhere in the data, not through this employee.
            return None
        seen.add(current)
        current = parents[current]
    return None


def build_tree(employees: Sequence[Any], *, company_name: str = DEFAULT_COMPANY_NAME) -> OrgNode:
    """Build the org chart.

    - One root: returned as-is.
    - Several roots: wrapped in a synthetic company node.
    - No employees: a company node without children.
    """

    nodes: dict[int, OrgNode] = {}
    for e in employees:
        node = _to_node(e)
        nodes[node.node_id] = node

    parents = _parent_map(employees)
    looped = _cycle_members(parents)
    roots: list[OrgNode] = []
    for e in employees:
        emp_id = _attr(e, "employee_id", _attr(e, "id"))
        sup_id = parents.get(emp_id)
        node = nodes[emp_id]
        if sup_id is not None and sup_id in nodes and emp_id not in looped:
            nodes[sup_id].children.append(node)
        else:
            roots.append(node)

    if len(roots) == 1:
        return roots[0]
    return OrgNode(node_id=None, name=company_name, is_root=True, children=roots)
