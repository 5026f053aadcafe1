"""Hand a parsed document to another process as JSON, and back."""

from wsmark import from_json, parse, to_json, unparse

doc = parse("..draft\n.h2 Intro\n.lm 4\nSome \x13underlined\x13 text\n")
payload = to_json(doc, indent=2)
print(payload)

restored = from_json(payload)
assert restored == doc
print(repr(unparse(restored)))
