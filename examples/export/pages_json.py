"""Hand pages to an external renderer as JSON (595 x 842 sheets)."""

from penleaf import PAGE_HEIGHT, PAGE_WIDTH, derive_pages, pages_to_json

pages = derive_pages("## Results\n| Trial | Score |\n|---|---|\n| 1 | 0.91 |\n")
print(f"{len(pages)} page(s) at {PAGE_WIDTH}x{PAGE_HEIGHT}")
print(pages_to_json(pages, indent=2))
