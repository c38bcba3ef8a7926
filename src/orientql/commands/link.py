from orientql.commands.base import Command


class Link(Command):
    """CREATE LINK: turns a foreign-key-like property into record links.

    Example:
        >>> Link("Comment", "postId", "post").with_("Post", "id").get_raw()
        'CREATE LINK post FROM Comment.postId TO Post.id'
    """

    SCHEMA = (
        "CREATE LINK :Name :LinkType "
        "FROM :SourceClass.:SourceProperty "
        "TO :DestinationClass.:DestinationProperty :Inverse"
    )

    def __init__(self, class_: str, property: str, alias: str, inverse: bool = False):
        super().__init__()

        self.set_token("SourceClass", class_)
        self.set_token("SourceProperty", property)
        self.set_token("Name", alias)

        if inverse:
            self.set_token("Inverse", "INVERSE")

    def with_(self, class_: str, property: str) -> "Link":
        """Set the destination ``class_.property`` of the link."""
        self.set_token("DestinationClass", class_, append=False)
        return self.set_token("DestinationProperty", property, append=False)

    def type(self, link_type: str) -> "Link":
        """Set the link collection type (LINK, LINKSET, LINKLIST)."""
        return self.set_token("LinkType", link_type, append=False)
