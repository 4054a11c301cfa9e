# -*- coding: utf-8 -*-
"""
sudoku_solver.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- board.py  : 9x9 の盤面 Grid と、ボックス番号の計算
- parser.py : CSV / DataFrame から Grid への変換と、その逆
"""
