#%% [markdown]
# # Personal Inflation Demo

#
# This file is configured to run in VS Code's Interactive Window.

# ## Build a basket
#%%
import logging
from datetime import datetime
from inflation_basket import BasketItem, DateRange, EngineConfig, InflationEngine, record_price

logging.basicConfig(level=logging.DEBUG)

now = datetime(2024, 6, 15)
basket = [
    BasketItem(id='rent', name='Rent', category='Housing', price=1000,
               history=[{'date': '2024-01-01', 'value': 1000}]),
    BasketItem(id='coffee', name='Coffee', category='Groceries', price=4.0,
               history=[{'date': '2023-11-20', 'value': 3.5}, {'date': '2024-04-02', 'value': 4.0}]),
    BasketItem(id='bus', name='Bus pass', category='Transport', price=60,
               history=[{'date': '2024-06-10', 'value': 60}]),
]
basket[0] = record_price(basket[0], 1100, '2024-06-01', today=now.date())

#%% [markdown]
# ## Personal inflation per range

#%%
engine = InflationEngine(EngineConfig(benchmark_inflation_pct=3.0))

for token in DateRange:
    summary = engine.summary(basket, token, now)
    print(f"{token.value:>3}: {summary.inflation_pct:6.2f}% ({summary.level}, {summary.sample_count} items)")

engine.breakdown(basket, DateRange.YEAR_TO_DATE, now)
# %%
