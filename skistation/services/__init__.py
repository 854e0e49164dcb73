"""
High-level use cases for the ski station API.

Each service orchestrates repositories to implement the business rules
(subscription end dates, skier assignments, registrations). Routers call
these services instead of touching the session or the models' tables.
"""
