"""Thread safe — parse 1000 messages in parallel against one member list."""

from concurrent.futures import ThreadPoolExecutor

from chatmarkup import MarkupOptions, collect_mentions, parse

options = MarkupOptions(mentions=[f"user{i}" for i in range(50)])
messages = [f"ping @user{i % 50} about *item {i}*" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(lambda m: parse(m, options), messages))

print(f"Parsed {len(results)} messages in parallel")
print("Mentioned:", len({key for nodes in results for key in collect_mentions(nodes)}))
