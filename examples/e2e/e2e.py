"""
hasp End-to-End Example

Demonstrates the parsing pipeline:
1. Tokenize source text
2. Classify single atoms
3. Parse tokens into top-level expressions
4. Inspect a syntax error

Run: pip install -e . && python examples/e2e/e2e.py
"""

from hasp import classify, parse, tokenize

print("=== hasp E2E Demo ===\n")

src = """(define pi 3.14159)
(define (area r) (* pi r r))
(area 2)
#t"""

# 1. Tokenize
tokens = tokenize(src)
print(f"1. Tokenized into {len(tokens)} tokens")
print(f"   First tokens: {tokens[:6]}\n")

# 2. Classify
print("2. Classified atoms")
for tok in ("42", "-3.5", "#f", '"hi"', "area"):
    print(f"   {tok:>6} -> {classify(tok)}")
print()

# 3. Parse
exprs = parse(tokens)
print(f"3. Parsed {len(exprs)} top-level expressions")
for expr in exprs:
    print(f"   {expr}")
print()

# 4. Errors
for bad in (["(", "1"], [")"], ["4."]):
    try:
        parse(bad)
    except SyntaxError as e:
        print(f"4. {bad!r} -> SyntaxError: {e.msg}")

print("\n=== Done ===")
