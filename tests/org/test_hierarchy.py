from __future__ import annotations

from conftest import make_employee
from src.rrhh_system.rrhh_system.org.hierarchy import build_tree, find_supervisor_cycle


def _ids(node):
    return [n.node_id for n in node.walk()]


def test_single_root_is_returned_directly():
    emps = [
        make_employee(1, "Gerente", "General"),
        make_employee(2, "Jefa", "Ops", supervisor_id=1),
        make_employee(3, "Operario", "Uno", supervisor_id=2),
    ]
    tree = build_tree(emps, company_name="ACME")

    assert tree.node_id == 1
    assert not tree.is_root
    assert [c.node_id for c in tree.children] == [2]
    assert [c.node_id for c in tree.children[0].children] == [3]


def test_multiple_roots_get_company_node():
    emps = [make_employee(1), make_employee(2), make_employee(3, supervisor_id=1)]
    tree = build_tree(emps, company_name="ACME")

    assert tree.is_root
    assert tree.name == "ACME"
    assert sorted(c.node_id for c in tree.children) == [1, 2]


def test_empty_input_gives_company_node_without_children():
    tree = build_tree([], company_name="ACME")
    assert tree.is_root
    assert tree.children == []


def test_unknown_supervisor_becomes_root():
    tree = build_tree([make_employee(1), make_employee(2, supervisor_id=99)], company_name="ACME")
    assert sorted(c.node_id for c in tree.children) == [1, 2]


def test_every_employee_appears_exactly_once_even_with_cycle():
    emps = [
        make_employee(1, supervisor_id=2),
        make_employee(2, supervisor_id=1),
        make_employee(3, supervisor_id=1),
        make_employee(4),
    ]
    tree = build_tree(emps, company_name="ACME")

    ids = [i for i in _ids(tree) if i is not None]
    assert sorted(ids) == [1, 2, 3, 4]


def test_placeholders_for_missing_job_and_department():
    tree = build_tree([make_employee(1, "Luis", "Soto")], company_name="ACME")
    assert tree.job_title == "Sin Cargo"
    assert tree.dept_name == "Sin Departamento"
    assert tree.initials == "LS"


def test_find_supervisor_cycle():
    emps = [make_employee(1), make_employee(2, supervisor_id=1), make_employee(3, supervisor_id=2)]

    assert find_supervisor_cycle(emps, 1, 3) == [1, 3, 2, 1]
    assert find_supervisor_cycle(emps, 3, 1) is None
    assert find_supervisor_cycle(emps, None, 1) is None
    assert find_supervisor_cycle(emps, 2, 2) == [2, 2]


def test_cycle_members_become_roots_and_their_reports_stay_attached():
    emps = [
        make_employee(1, supervisor_id=2),
        make_employee(2, supervisor_id=1),
        make_employee(3, supervisor_id=1),
        make_employee(4),
        make_employee(5, supervisor_id=5),
    ]
    tree = build_tree(emps, company_name="ACME")

    by_id = {c.node_id: c for c in tree.children}
    assert sorted(by_id) == [1, 2, 4, 5]
    assert [c.node_id for c in by_id[1].children] == [3]


def test_long_chain_next_to_a_cycle():
    depth = 3000
    emps = [make_employee(1)]
    emps += [make_employee(i, supervisor_id=i - 1) for i in range(2, depth + 1)]
    emps += [
        make_employee(depth + 1, supervisor_id=depth + 2),
        make_employee(depth + 2, supervisor_id=depth + 1),
        make_employee(depth + 3, supervisor_id=depth),
    ]
    tree = build_tree(emps, company_name="ACME")

    assert sorted(c.node_id for c in tree.children) == [1, depth + 1, depth + 2]
    nodes = {n.node_id: n for n in tree.walk()}
    assert len(nodes) == depth + 4
    assert [c.node_id for c in nodes[depth].children] == [depth + 3]
    assert nodes[depth + 1].children == []
