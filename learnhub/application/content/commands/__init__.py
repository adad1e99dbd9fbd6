from learnhub.application.content.commands.archive_content import (
    ArchiveContentCommand,
    ArchiveContentHandler,
)
from learnhub.application.content.commands.create_content import (
    CreateContentCommand,
    CreateContentHandler,
)
from learnhub.application.content.commands.create_topic import (
    CreateTopicCommand,
    CreateTopicHandler,
)
from learnhub.application.content.commands.publish_content import (
    PublishContentCommand,
    PublishContentHandler,
)
from learnhub.application.content.commands.unpublish_content import (
    UnpublishContentCommand,
    UnpublishContentHandler,
)
from learnhub.application.content.commands.update_content import (
    UpdateContentCommand,
    UpdateContentHandler,
)

__all__ = [
    "ArchiveContentCommand",
    "ArchiveContentHandler",
    "CreateContentCommand",
    "CreateContentHandler",
    "CreateTopicCommand",
    "CreateTopicHandler",
    "PublishContentCommand",
    "PublishContentHandler",
    "UnpublishContentCommand",
    "UnpublishContentHandler",
    "UpdateContentCommand",
    "UpdateContentHandler",
]
