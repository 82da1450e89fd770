"""
Service layer for tagsnap.

Contains the steps of a collection run and the loop that drives them:
- TagService: Version tag enumeration and selection
- ProcessedLedger: "Already recorded?" checks
- CheckoutController: Source repository checkouts
- FileExtractor: Copying tracked files
- CommitRecorder: Committing the tracking repository
- CollectService: The per-tag loop

Services are the primary API for the command to use.
"""

from .tag_service import TagService, select_tags
from .ledger import ProcessedLedger, CommitHistoryLedger, ProcessedSetLedger, create_ledger
from .checkout import CheckoutController
from .extractor import FileExtractor
from .recorder import CommitRecorder, CommitOutcome
from .collect_service import CollectService

__all__ = [
    'TagService',
    'select_tags',
    'ProcessedLedger',
    'CommitHistoryLedger',
    'ProcessedSetLedger',
    'create_ledger',
    'CheckoutController',
    'FileExtractor',
    'CommitRecorder',
    'CommitOutcome',
    'CollectService',
]
