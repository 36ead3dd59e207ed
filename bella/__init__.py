"""
A tree-walking interpreter for Bella, a small imperative expression language:
numbers, booleans and arrays; arithmetic, relational and logical operators;
conditional expressions; variables; user-defined and built-in functions;
while-loops; and print statements.
"""
