from pydantic import BaseModel


class Friendship(BaseModel):
    user_id: int
    friend_id: int
    confirmed: bool = False
