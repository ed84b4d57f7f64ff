from fqn_reconcile.config import Settings
from fqn_reconcile.core.files import FilesystemFileListProvider
from fqn_reconcile.core.reconciler import IdentityReconciler
from fqn_reconcile.core.resolver import Psr4CandidateResolver
from fqn_reconcile.core.syntax import TreeSitterSyntaxProvider


def create_reconciler(settings: Settings) -> IdentityReconciler:
    return IdentityReconciler(
        Psr4CandidateResolver.from_composer(settings.project_root),
        TreeSitterSyntaxProvider(),
    )


def create_file_list_provider(settings: Settings) -> FilesystemFileListProvider:
    return FilesystemFileListProvider(
        settings.project_root,
        include_patterns=settings.include_patterns,
        exclude_patterns=settings.exclude_patterns,
        follow_symlinks=settings.follow_symlinks,
    )
