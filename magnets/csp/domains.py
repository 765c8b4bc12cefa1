# -*- coding: utf-8 -*-
"""
マグネット（変数）ごとのドメイン（候補の向き）を扱うモジュールです。

ドメインは探索の再帰レベルごとに「スナップショット」として持ちます。
子ノードに渡す前に必ず :func:`copy_domains` でコピーするので、
バックトラック時は子のスナップショットを捨てるだけで元に戻ります。
"""

from __future__ import annotations

from typing import List, Sequence

from ..types import Assignment, Domains, Magnet, Orientation

# 初期ドメイン。UNASSIGNED はドメインには入れません。
INITIAL_VALUES = (
    Orientation.POSITIVE_NEGATIVE,
    Orientation.NEGATIVE_POSITIVE,
    Orientation.EMPTY,
)


def build_initial_domains(magnets: Sequence[Magnet]) -> Domains:
    return [list(INITIAL_VALUES) for _ in magnets]


def build_initial_assignment(magnets: Sequence[Magnet]) -> Assignment:
    return [Orientation.UNASSIGNED for _ in magnets]


def copy_domains(domains: Domains) -> Domains:
    return [list(d) for d in domains]


def remove_value(domain: List[Orientation], value: Orientation) -> bool:
    """
    ドメインから値を取り除きます。取り除けたら True。

    残りの値の順序は保ちます（LCV の同点時の順序を安定させるため）。
    """
    if value in domain:
        domain.remove(value)
        return True
    return False


def options_of(var: int, domains: Domains, assignment: Assignment) -> List[Orientation]:
    """
    変数が取り得る値の一覧。

    割り当て済みならその値だけ、未割り当てなら現在のドメインを返します。
    """
    value = assignment[var]
    if value is not Orientation.UNASSIGNED:
        return [value]
    return domains[var]
