from struct_agent.parsers.mysql_ddl import MySQLDDLParser, parse_sql

__all__ = ["MySQLDDLParser", "parse_sql"]
