"""Domain layer for homefin application.

Services live in their own modules (``homefin.domain.income`` and so on);
they are not re-exported here so that the database layer can import
``homefin.domain.entities`` without pulling the services in.
"""
