"""
Local authorization agent backed by the Cedar policy engine.

The agent is a small Flask application. At startup it loads a Cedar policy
set and, optionally, a JSON schema (see :mod:`cedar_agent.services.artifacts`);
both are held read-only for the life of the process. Clients then ``POST``
authorization requests to ``/authorize``::

    {"principal": "User::\"alice\"",
     "action": "Action::\"view\"",
     "resource": "Photo::\"vacation.jpg\"",
     "entities": []}

and receive a decision with the policies that determined it::

    {"decision": "Allow",
     "diagnostics": {"reason": ["policy0"], "errors": []}}

The agent does not authenticate its callers; it is meant to run beside the
service that asks it for decisions.
"""
