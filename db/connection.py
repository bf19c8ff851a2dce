import os
import logging

import boto3
import psycopg2
from botocore.exceptions import BotoCoreError, ClientError

from settings import AppConfig

logger = logging.getLogger("bookshelf-lambda")


def get_database_url_from_ssm(parameter_name: str) -> str:
    """
    Fetch the connection string securely from AWS SSM Parameter Store.
    """
    ssm = boto3.client('ssm', region_name=AppConfig.get_value("aws_region"))
    response = ssm.get_parameter(Name=parameter_name, WithDecryption=True)
    return response['Parameter']['Value']


def resolve_database_url() -> str:
    """
    Return the PostgreSQL connection string, or "" when no store is configured.
    Lookup order:
      - DATABASE_URL environment variable
      - the SSM parameter named by BOOKSHELF_DATABASE_URL_SSM_PARAM
    """
    database_url = os.environ.get("DATABASE_URL", "").strip()
    if database_url:
        return database_url

    parameter_name = AppConfig.get_value("database_url_ssm_param")
    if not parameter_name:
        return ""
    try:
        return get_database_url_from_ssm(parameter_name).strip()
    except (BotoCoreError, ClientError) as e:
        logger.error(f"Failed to read {parameter_name} from SSM: {e}")
        return ""


def get_db_connection(database_url: str):
    """
    Establish and return an autocommit psycopg2 connection.
    Every statement is its own transaction.
    """
    if database_url.startswith("postgres://"):
        database_url = database_url.replace("postgres://", "postgresql://", 1)
    conn = psycopg2.connect(database_url, connect_timeout=10)
    conn.autocommit = True
    return conn
