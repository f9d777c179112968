"""auth/ -- Credential and session authentication core.

UserStore (auth/users.py) and SessionStore (auth/sessions.py) are the two
leaf stores; AuthService (auth/service.py) sequences calls into them.

Layer rule: auth/ imports only stdlib, third-party libraries, and core/.
It does NOT import from api/. api/ imports from auth/, not the other way around.
"""
