"""
DynamoDB Repository for user accounts.
Users are keyed by username and carry a bcrypt password hash.
"""
import logging
from datetime import datetime, timezone
from typing import Optional
import boto3
from botocore.exceptions import ClientError
from src.core.config import Settings
from src.core.exceptions import DynamoDBException
from src.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class DynamoUserRepository(UserRepository):
    """Repository for user records in DynamoDB."""

    def __init__(self, settings: Settings):
        self.dynamodb = boto3.resource(
            'dynamodb',
            region_name=settings.aws_region,
            endpoint_url=settings.database_url or None
        )
        self.table = self.dynamodb.Table(settings.users_table_name)

    def get_by_username(self, username: str) -> Optional[dict]:
        """
        Retrieve a user record by username.

        Args:
            username: Username to look up

        Returns:
            User item dict or None if not found

        Raises:
            DynamoDBException: If the lookup fails
        """
        try:
            response = self.table.get_item(Key={'username': username})
            return response.get('Item')

        except ClientError as e:
            raise DynamoDBException(f"Failed to get user: {str(e)}") from e
        except Exception as e:
            raise DynamoDBException(f"Unexpected error getting user: {str(e)}") from e

    def record_login(self, username: str) -> None:
        """
        Update the user's last_login timestamp.

        Raises:
            DynamoDBException: If the update fails
        """
        try:
            self.table.update_item(
                Key={'username': username},
                UpdateExpression="SET #last_login = :last_login",
                ExpressionAttributeNames={'#last_login': 'last_login'},
                ExpressionAttributeValues={':last_login': datetime.now(timezone.utc).isoformat()}
            )

        except ClientError as e:
            raise DynamoDBException(f"Failed to record login: {str(e)}") from e
        except Exception as e:
            raise DynamoDBException(f"Unexpected error recording login: {str(e)}") from e

    def ping(self) -> bool:
        try:
            self.table.load()
            return True
        except Exception as e:
            logger.warning("User store unreachable: %s", e)
            return False
