# Walk a self-referencing application state and print it as a tree.
import xray
from xray.render import render

state = {"user": {"name": "ada", "roles": ["admin"]}, "cache": {}}
state["cache"]["state"] = state

engine = xray.XRayEngine(state, collapse=["cache"])
print(render(engine.describe()))

engine.toggle("$.cache")
tree = engine.describe()
assert tree.child("cache").node.child("state").node.kind is xray.Kind.CIRCULAR_REFERENCE
print(render(tree, title="expanded"))
