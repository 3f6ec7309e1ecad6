"""
Acesso ao banco MySQL de um site SPIP.

Os nomes de tabela são montados a partir de ``table_prefix`` e
``site_prefix`` da configuração, valores controlados pelo operador e
interpolados diretamente no SQL.  Todo valor vindo das linhas (ids) ou
dos filtros de status é passado como parâmetro da consulta.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

import pymysql
from pymysql.cursors import DictCursor

from spip_to_jekyll.models.import_options import ImportOptions

# Vocabulário normalizado (configuração, front matter) -> coluna ``statut`` do SPIP.
STATUS_TO_SPIP: Dict[str, str] = {
    "publish": "publie",
    "draft": "prepa",
    "private": "prop",
    "revision": "refuse",
    "trash": "poubelle",
}
SPIP_TO_STATUS: Dict[str, str] = {v: k for k, v in STATUS_TO_SPIP.items()}

PUBLISHED_COMMENT_STATUS = "publie"

Query = Tuple[str, Tuple[Any, ...]]


def to_spip_status(status: str) -> str:
    return STATUS_TO_SPIP.get(status, status)


def from_spip_status(statut: Optional[str]) -> str:
    """Converte o ``statut`` do SPIP; valores desconhecidos passam inalterados."""
    value = (statut or "").strip()
    return SPIP_TO_STATUS.get(value, value)


def article_listing_query(options: ImportOptions) -> Query:
    """Consulta usada pelo índice de páginas: id, título e rubrique de cada artigo."""
    sql = f"""
        SELECT
          posts.id_article  AS `id`,
          posts.titre       AS `title`,
          posts.id_rubrique AS `category_id`
        FROM {options.table('articles')} AS `posts`"""
    return sql, ()


def article_detail_query(options: ImportOptions, statuses: Sequence[str]) -> Query:
    """Consulta completa dos artigos com o autor, filtrada por ``statuses``.

    Uma lista de status vazia desativa o filtro.
    """
    sql = f"""
        SELECT
          posts.id_article    AS `id`,
          posts.titre         AS `title`,
          posts.soustitre     AS `subtitle`,
          posts.descriptif    AS `description`,
          posts.chapo         AS `lead`,
          posts.texte         AS `content`,
          posts.date          AS `date`,
          posts.lang          AS `lang`,
          posts.statut        AS `status`,
          posts.id_rubrique   AS `category_id`,
          users.nom           AS `author`,
          users.login         AS `author_login`,
          users.email         AS `author_email`,
          users.url_site      AS `author_url`
        FROM {options.table('articles')} AS `posts`
          LEFT JOIN {options.table('auteurs_liens')} AS `temp`
            ON posts.id_article = temp.id_objet
          LEFT JOIN {options.table('auteurs')} AS `users`
            ON temp.id_auteur = users.id_auteur"""
    params: Tuple[Any, ...] = ()
    if statuses:
        placeholders = ", ".join(["%s"] * len(statuses))
        sql += f"""
        WHERE posts.statut IN ({placeholders})"""
        params = tuple(to_spip_status(s) for s in statuses)
    return sql, params


def article_terms_query(options: ImportOptions, post_id: Any) -> Query:
    """Palavras-chave (``mots``) ligadas a um artigo: nome e grupo."""
    sql = f"""
        SELECT
          terms.titre AS `name`,
          terms.type  AS `type`
        FROM
          {options.table('mots')} AS `terms`,
          {options.table('mots_liens')} AS `trels`
        WHERE
          trels.id_objet = %s AND
          trels.id_mot = terms.id_mot"""
    return sql, (post_id,)


def article_comments_query(options: ImportOptions, post_id: Any) -> Query:
    """Mensagens publicadas do fórum de um artigo."""
    sql = f"""
        SELECT
          auteur       AS `author`,
          email_auteur AS `author_email`,
          date_heure   AS `date`,
          titre        AS `title`,
          texte        AS `content`
        FROM {options.table('forum')}
        WHERE
          id_objet = %s AND
          statut = %s"""
    return sql, (post_id, PUBLISHED_COMMENT_STATUS)


def assets_query(options: ImportOptions) -> Query:
    sql = f"""
        SELECT
          id_document AS `id`,
          extension   AS `extension`,
          fichier     AS `path`
        FROM {options.table('documents')}"""
    return sql, ()


class SpipDatabase:
    """Conexão única com o banco do SPIP.

    Usada como gerenciador de contexto; a conexão é fechada mesmo quando a
    importação falha no meio::

        with SpipDatabase(options) as db:
            for row in db.articles():
                ...
    """

    def __init__(self, options: ImportOptions, *, connect=pymysql.connect) -> None:
        self.options = options
        self._connect = connect
        self.connection = None

    def open(self) -> "SpipDatabase":
        opts = self.options
        kwargs: Dict[str, Any] = {
            "user": opts.user,
            "password": opts.password,
            "database": opts.dbname,
            "charset": "utf8mb4",
            "cursorclass": DictCursor,
        }
        if opts.socket:
            kwargs["unix_socket"] = opts.socket
        else:
            kwargs["host"] = opts.host
            kwargs["port"] = int(opts.port)
        self.connection = self._connect(**kwargs)
        return self

    def close(self) -> None:
        if self.connection is not None:
            self.connection.close()
            self.connection = None

    def __enter__(self) -> "SpipDatabase":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def query(self, sql: str, params: Iterable[Any] = ()) -> Iterator[Dict[str, Any]]:
        """Executa ``sql`` e devolve as linhas, uma a uma, como dicionários."""
        if self.connection is None:
            raise RuntimeError("SpipDatabase is not open")
        with self.connection.cursor() as cursor:
            cursor.execute(sql, tuple(params) or None)
            while True:
                row = cursor.fetchone()
                if row is None:
                    break
                yield row

    def article_listing(self) -> Iterator[Dict[str, Any]]:
        return self.query(*article_listing_query(self.options))

    def articles(self) -> Iterator[Dict[str, Any]]:
        return self.query(*article_detail_query(self.options, self.options.status))

    def article_terms(self, post_id: Any) -> List[Dict[str, Any]]:
        return list(self.query(*article_terms_query(self.options, post_id)))

    def article_comments(self, post_id: Any) -> List[Dict[str, Any]]:
        return list(self.query(*article_comments_query(self.options, post_id)))

    def assets(self) -> Iterator[Dict[str, Any]]:
        return self.query(*assets_query(self.options))
