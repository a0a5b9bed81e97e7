"""S3 adapter for object store operations."""

import logging
from typing import List, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ...config import GLOBAL_SIGNING_REGION, ProxySettings, RepositoryConfig
from ...domain.entities import ObjectPrefix, ObjectSummary, StoredItem
from ...domain.exceptions import ObjectStoreError
from ...domain.repositories import ObjectStore
from ...domain.services import url_region

logger = logging.getLogger(__name__)


class Boto3ObjectStore(ObjectStore):
    """
    S3 implementation of the ObjectStore.

    Handles listing and metadata calls using boto3.
    """

    def __init__(self, s3_client):
        self.s3_client = s3_client

    @classmethod
    def from_config(cls, config: RepositoryConfig,
                    proxy: Optional[ProxySettings] = None) -> 'Boto3ObjectStore':
        """Create a store bound to the repository credentials and endpoint."""
        client_config = Config(proxies=proxy.as_botocore_proxies()) if proxy else None
        if proxy:
            logger.info(f"Using {proxy.type} proxy {proxy.host} for {config.endpoint}")
            if proxy.type.upper() == 'SOCKS5':
                logger.warning(f"SOCKS5 proxy {proxy.host} is not supported by botocore; S3 requests will fail")

        credentials = config.client_credentials()
        if not credentials and (config.access_key or config.secret_key):
            logger.warning("Only one of access key and secret key is set; using the default credential chain")

        s3_client = boto3.client(
            's3',
            region_name=cls.signing_region(config),
            endpoint_url=config.endpoint_url,
            config=client_config,
            **credentials
        )
        return cls(s3_client)

    @staticmethod
    def signing_region(config: RepositoryConfig) -> str:
        """Region requests are signed for; the global endpoint signs as us-east-1."""
        if config.has_regional_endpoint:
            return url_region(config.region)
        return GLOBAL_SIGNING_REGION

    def list_buckets(self) -> List[str]:
        """List buckets from S3."""
        try:
            response = self.s3_client.list_buckets()
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error listing buckets: {e}")
            raise ObjectStoreError(f"Failed to list buckets: {str(e)}") from e
        return [bucket['Name'] for bucket in response.get('Buckets', [])]

    def list_objects(self, bucket: str, prefix: str = '', delimiter: str = '/') -> List[StoredItem]:
        """List one level of an S3 bucket, following every page."""
        params = {'Bucket': bucket, 'Prefix': prefix}
        if delimiter:
            params['Delimiter'] = delimiter

        items = []
        try:
            paginator = self.s3_client.get_paginator('list_objects_v2')
            for page in paginator.paginate(**params):
                for obj in page.get('Contents', []):
                    items.append(ObjectSummary(
                        key=obj['Key'],
                        size=obj.get('Size', 0),
                        last_modified=obj.get('LastModified')
                    ))
                for common_prefix in page.get('CommonPrefixes', []):
                    items.append(ObjectPrefix(prefix=common_prefix['Prefix']))
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error listing objects in s3://{bucket}/{prefix}: {e}")
            raise ObjectStoreError(f"Failed to list s3://{bucket}/{prefix}: {str(e)}") from e
        return items

    def get_object_info(self, bucket: str, key: str) -> ObjectSummary:
        """Get object metadata from S3."""
        try:
            response = self.s3_client.head_object(Bucket=bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Error reading metadata for s3://{bucket}/{key}: {e}")
            raise ObjectStoreError(f"Failed to get metadata for s3://{bucket}/{key}: {str(e)}") from e
        return ObjectSummary(
            key=key,
            size=response.get('ContentLength', 0),
            last_modified=response.get('LastModified')
        )
