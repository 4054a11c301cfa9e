# -*- coding: utf-8 -*-
"""
sudoku_solver.csp パッケージ

制約充足（CSP）としての数独探索に関する処理をまとめています。

- constraints.py : 行・列・ボックスごとの使用済み数字を管理する ConstraintTracker
- search.py      : 深さ優先のバックトラック探索
"""
