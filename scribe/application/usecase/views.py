"""Response shapes shared by several use cases."""

from datetime import datetime

from pydantic import BaseModel

from scribe.domain.model import Comment, Post, ReactionSet, Reply, User


class ReactionSetView(BaseModel):
    """Users who reacted and their count."""

    users: list[str]
    count: int

    @classmethod
    def from_domain(cls, reactions: ReactionSet) -> "ReactionSetView":
        return cls(users=[str(u) for u in reactions.users], count=reactions.count)


class UserView(BaseModel):
    """Public profile of a user."""

    user_id: str
    username: str
    avatar_url: str | None
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserView":
        return cls(
            user_id=str(user.id),
            username=user.username.root,
            avatar_url=user.avatar_url,
            created_at=user.created_at,
        )


class ProfileView(UserView):
    """Profile of the calling user, including private fields."""

    email: str

    @classmethod
    def from_domain(cls, user: User) -> "ProfileView":
        return cls(
            user_id=str(user.id),
            username=user.username.root,
            avatar_url=user.avatar_url,
            created_at=user.created_at,
            email=user.email.root,
        )


class PostView(BaseModel):
    """Post as returned by the API."""

    post_id: str
    title: str
    content: str
    author_id: str
    author_username: str
    created_at: datetime
    updated_at: datetime
    upvotes: ReactionSetView
    downvotes: ReactionSetView

    @classmethod
    def from_domain(cls, post: Post) -> "PostView":
        return cls(
            post_id=str(post.id),
            title=post.title,
            content=post.content,
            author_id=str(post.author_id),
            author_username=post.author_username.root,
            created_at=post.created_at,
            updated_at=post.updated_at,
            upvotes=ReactionSetView.from_domain(post.upvotes),
            downvotes=ReactionSetView.from_domain(post.downvotes),
        )


class ReplyView(BaseModel):
    """Reply as returned by the API."""

    reply_id: str
    author_id: str
    author_username: str
    content: str
    created_at: datetime
    updated_at: datetime
    likes: ReactionSetView
    dislikes: ReactionSetView

    @classmethod
    def from_domain(cls, reply: Reply) -> "ReplyView":
        return cls(
            reply_id=str(reply.id),
            author_id=str(reply.author_id),
            author_username=reply.author_username.root,
            content=reply.content,
            created_at=reply.created_at,
            updated_at=reply.updated_at,
            likes=ReactionSetView.from_domain(reply.likes),
            dislikes=ReactionSetView.from_domain(reply.dislikes),
        )


class CommentView(BaseModel):
    """Comment, with its replies, as returned by the API."""

    comment_id: str
    post_id: str
    author_id: str
    author_username: str
    content: str
    created_at: datetime
    updated_at: datetime
    likes: ReactionSetView
    dislikes: ReactionSetView
    replies: list[ReplyView]

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentView":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            author_username=comment.author_username.root,
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            likes=ReactionSetView.from_domain(comment.likes),
            dislikes=ReactionSetView.from_domain(comment.dislikes),
            replies=[ReplyView.from_domain(r) for r in comment.replies],
        )
