# %% [markdown]
# # Use specfilter

# %%
# append specfilter to system PATH.
import sys
from pathlib import Path

parent_path = str(Path.cwd().parent)
if parent_path not in sys.path:
    sys.path.append(parent_path)

# %%
import specfilter
from specfilter import Color, Product, ProductFilter, SpecificationFilter

products = [
    Product(name="Red Shirt", color=Color.RED),
    Product(name="Blue Shirt", color=Color.BLUE),
    Product(name="Green Hat", color=Color.GREEN),
]

# %% [markdown]
# ## Per-criterion filter
#
# - One method per criterion; a new criterion means editing ProductFilter.

# %%
for product in ProductFilter().filter_by_color(products, Color.RED):
    print(product.name)

# %% [markdown]
# ## Specification filter
#
# - The filter never changes; new criteria are new specifications.

# %%
better_filter = SpecificationFilter(item_type=Product)

print(better_filter.filter(products, specfilter.by_color(Color.RED)))
print(better_filter.filter(products, specfilter.by_name("Shirt")))

red_shirts = specfilter.by_color(Color.RED) & specfilter.by_name("Shirt")
print(better_filter.filter(products, red_shirts))

# %% [markdown]
# ## Build specifications by name

# %%
print("Available specifications:", specfilter.list_specifications())

blue_or_hat = specfilter.build_specification({"color": "blue", "name": "Hat"}, match="any")
print(better_filter.filter(products, blue_or_hat))
