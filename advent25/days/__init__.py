"""Puzzle solvers, one module per day from day 1 to day 9."""