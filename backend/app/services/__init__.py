"""
Services package — business operations behind the HTTP routes.

Services own validation, error mapping and logging; persistence goes
through `app.repositories`.
"""
