"""Parse a chat message in 3 lines — zero config, zero deps."""

from chatmarkup import parse, to_json

nodes = parse("hey @Sam, *look* at www.example.com :eyes:", {"mentions": ["sam"]})
print(nodes)
print(to_json(nodes, indent=2))
