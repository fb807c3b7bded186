"""Block API: POST/DELETE/GET /{phone-number-id}/block."""

from pydantic import Field

from wacloudapi.models import GraphModel, Paging

from .base import MESSAGING_PRODUCT, ResourceApi


class BlockResult(GraphModel):
    input: str
    wa_id: str | None = None


class BlockedUsers(GraphModel):
    added_users: list[BlockResult] = Field(default_factory=list)
    removed_users: list[BlockResult] = Field(default_factory=list)
    failed_users: list[BlockResult] = Field(default_factory=list)


class BlockResponse(GraphModel):
    messaging_product: str | None = None
    block_users: BlockedUsers = Field(default_factory=BlockedUsers)


class BlockedUser(GraphModel):
    wa_id: str


class BlockedUsersResponse(GraphModel):
    data: list[BlockedUser] = Field(default_factory=list)
    paging: Paging | None = None


def _users_payload(users: list[str]) -> dict:
    if not users:
        raise ValueError("at least one user is required")
    return {
        "messaging_product": MESSAGING_PRODUCT,
        "block_users": [{"user": user} for user in users],
    }


class BlockApi(ResourceApi):
    async def block_users(self, users: list[str]) -> BlockResponse:
        response = await self.client.post(
            self.client.phone_path("block"),
            _users_payload(users),
            response_model=BlockResponse,
        )
        self.logger.info(f"Blocked {len(response.block_users.added_users)} users")
        return response

    async def block_user(self, user: str) -> BlockResponse:
        return await self.block_users([user])

    async def unblock_users(self, users: list[str]) -> BlockResponse:
        response = await self.client.delete(
            self.client.phone_path("block"),
            payload=_users_payload(users),
            response_model=BlockResponse,
        )
        self.logger.info(f"Unblocked {len(response.block_users.removed_users)} users")
        return response

    async def unblock_user(self, user: str) -> BlockResponse:
        return await self.unblock_users([user])

    async def get_blocked_users(
        self, limit: int | None = None, after: str | None = None
    ) -> BlockedUsersResponse:
        params = {}
        if limit is not None:
            params["limit"] = str(limit)
        if after:
            params["after"] = after
        return await self.client.get(
            self.client.phone_path("block"),
            params=params or None,
            response_model=BlockedUsersResponse,
        )
