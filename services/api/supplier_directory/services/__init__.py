"""Business logic services.

Services contain all business logic and are called by routes.
The matching, featured-supplier, directory and review functions are pure
computations over data already fetched from the catalog store.
"""
