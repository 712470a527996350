import pytest

from tableacl.auth import Role
from tableacl.common.errors import ConfigParseError, PatternCompileError, UnknownRoleError
from tableacl.configs import ConfigManager, compile_table_acl, load_table_acl, parse_table_acl


@pytest.mark.parametrize("config", [
    b'{1:2}',
    b'{"1":"2"}',
    b'{"table1":{1:2}}',
    b'{"table1":{"READER":5}}',
    b'[]',
    b'not json',
])
def test_parse_invalid_json(config):
    with pytest.raises(ConfigParseError):
        parse_table_acl(config)


def test_invalid_role_name():
    with pytest.raises(UnknownRoleError) as exc:
        load_table_acl(b'{"table1":{"SOMEROLE":"user1"}}')
    assert "SOMEROLE" in str(exc.value)


def test_invalid_regex():
    with pytest.raises(PatternCompileError) as exc:
        load_table_acl(b'{"table(1":{"READER":"user1"}}')
    assert exc.value.pattern == "table(1"
    assert "table(1" in str(exc.value)


@pytest.mark.parametrize("config", [
    '{"table1":{"READER":"user1"}}',
    '{"table1":{"READER":"user1,user2", "WRITER":"user3"}}',
    '{"table[0-9]+":{"Reader":"user1,user2", "WRITER":"user3"}}',
    '{"table[0-9]+":{"Reader":"user1,*", "WRITER":"user3"}}',
    '''{
        "table[0-9]+":{"Reader":"user1,*", "WRITER":"user3"},
        "tbl[0-9]+":{"Reader":"user1,*", "WRITER":"user3", "ADMIN":"user4"}
    }''',
])
def test_valid_configs(config):
    assert load_table_acl(config)


def test_compile_keeps_document_order():
    rules = load_table_acl('{"b.*":{"READER":"u"}, "a.*":{"READER":"u"}, "c":{"ADMIN":"u"}}')
    assert [r.pattern for r in rules] == ["b.*", "a.*", "c"]


def test_compile_splits_principals():
    rules = compile_table_acl(parse_table_acl('{"t":{"reader":"user1,*", "ADMIN":"user4"}}'))
    assert rules[0].grants == {"user1": Role.READER, "*": Role.READER, "user4": Role.ADMIN}


def test_principals_are_not_trimmed():
    rules = load_table_acl('{"t":{"READER":"user1, user2"}}')
    assert set(rules[0].grants) == {"user1", " user2"}


def test_later_role_wins_within_pattern():
    rules = load_table_acl('{"t":{"ADMIN":"user1", "READER":"user1"}}')
    assert rules[0].grants["user1"] == Role.READER


def test_rule_match_is_unanchored():
    rule = load_table_acl('{"table[0-9]+":{"READER":"*"}}')[0]
    assert rule.matches("table42")
    assert rule.matches("my_table1_archive")
    assert not rule.matches("tables")


def test_posix_character_classes():
    rule = load_table_acl(r'{"^tbl_[[:digit:]]+$":{"ADMIN":"root"}}')[0]
    assert rule.matches("tbl_1")
    assert not rule.matches("tbl_x")


def test_end_of_text_anchor():
    rule = load_table_acl(r'{"^secret\\z":{"ADMIN":"root"}}')[0]
    assert rule.pattern == r"^secret\z"
    assert rule.matches("secret")
    assert not rule.matches("secret_keys")


@pytest.mark.parametrize("pattern", [r"(?=lookahead)", r"(a)\\1"])
def test_backtracking_only_syntax_is_rejected(pattern):
    with pytest.raises(PatternCompileError):
        load_table_acl('{"%s":{"READER":"*"}}' % pattern)


def test_config_manager_reads_bytes(tmp_path):
    path = tmp_path / "acl.json"
    path.write_text('{"t":{"READER":"*"}}')
    assert ConfigManager().load_table_acl(path) == b'{"t":{"READER":"*"}}'


def test_config_manager_resolves_relative_to_root(tmp_path):
    (tmp_path / "acl.json").write_text("{}")
    cm = ConfigManager(project_root=tmp_path)
    assert cm.load_table_acl("acl.json") == b"{}"


def test_config_manager_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigManager().load_table_acl(tmp_path / "missing.json")


def test_config_manager_unset_path(monkeypatch):
    from tableacl.common.settings import settings
    monkeypatch.setattr(settings, "table_acl_config_path", None)
    assert ConfigManager().table_acl_path() is None
    with pytest.raises(FileNotFoundError):
        ConfigManager().load_table_acl()
