"""Helpers for writing policy and schema fixtures."""

import json
import os
import shutil
import tempfile
from typing import Any, Optional

PERMIT_ALL = 'permit(principal, action, resource);'

PERMIT_ALICE = '''
permit(
    principal == User::"alice",
    action == Action::"view",
    resource
);
'''

SCHEMA = {
    '': {
        'entityTypes': {
            'User': {},
            'Photo': {}
        },
        'actions': {
            'view': {
                'appliesTo': {
                    'principalTypes': ['User'],
                    'resourceTypes': ['Photo']
                }
            }
        }
    }
}

SCHEMA_WITH_AGE = {
    '': {
        'entityTypes': {
            'User': {
                'shape': {
                    'type': 'Record',
                    'attributes': {'age': {'type': 'Long'}}
                }
            },
            'Photo': {}
        },
        'actions': SCHEMA['']['actions']
    }
}

UNRESOLVED_SCHEMA = {
    '': {
        'entityTypes': {
            'User': {'memberOfTypes': ['Nope']},
            'Photo': {}
        },
        'actions': {}
    }
}
"""Valid JSON, but refers to an entity type it never declares."""


class ArtifactDir(object):
    """A temporary directory holding a policy file and, maybe, a schema."""

    def __init__(self, policies: str = PERMIT_ALICE,
                 schema: Optional[Any] = None) -> None:
        self.path = tempfile.mkdtemp()
        self.policy_path = os.path.join(self.path, 'policy.cedar')
        self.schema_path = os.path.join(self.path, 'schema.cedarschema.json')
        with open(self.policy_path, 'w') as f:
            f.write(policies)
        if schema is not None:
            with open(self.schema_path, 'w') as f:
                f.write(schema if isinstance(schema, str)
                        else json.dumps(schema))

    @property
    def config(self) -> dict:
        return {'CEDAR_POLICY_PATH': self.policy_path,
                'CEDAR_SCHEMA_PATH': self.schema_path}

    def cleanup(self) -> None:
        shutil.rmtree(self.path, ignore_errors=True)
