import pytest

from bibnames import AuthorListParser, Name, NameKind, NameList, ParserOptions
from bibnames.parsing.parser import DEFAULT_AFFIX_WORDS


@pytest.fixture
def parser():
    return AuthorListParser(ParserOptions())


class TestParseSegment:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("John Smith", Name("John", "J.", None, "Smith", None)),
            ("Smith, John", Name("John", "J.", None, "Smith", None)),
            ("John von Neumann", Name("John", "J.", "von", "Neumann", None)),
            ("von Neumann, John", Name("John", "J.", "von", "Neumann", None)),
            ("von Neumann, Jr, John", Name("John", "J.", "von", "Neumann", "Jr")),
            ("von Last, Jr ,First", Name("First", "F.", "von", "Last", "Jr")),
            ("Peter Black Brown", Name("Peter Black", "P. B.", None, "Brown", None)),
            ("Black Brown, Peter", Name("Peter", "P.", None, "Black Brown", None)),
            ("Smith", Name(None, None, None, "Smith", None)),
            ("D.~E. Knuth", Name("D. E.", "D. E.", None, "Knuth", None)),
        ],
    )
    def test_orders(self, parser, text, expected):
        assert parser.parse_segment(text) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("{Tse-tung} Mao", Name("Tse-tung", "{Tse-tung}.", None, "Mao", None)),
            ("{van den Bergen}, Hans", Name("Hans", "H.", None, "van den Bergen", None)),
            ("Tse-tung Mao", Name("Tse-tung", "T.-t.", None, "Mao", None)),
            ("Firstname Bailey-Jones", Name("Firstname", "F.", None, "Bailey-Jones", None)),
            ("E. S. El-{M}allah", Name("E. S.", "E. S.", None, "El-{M}allah", None)),
            ("E. S. {K}ent-{B}oswell", Name("E. S.", "E. S.", None, "{K}ent-{B}oswell", None)),
            ("H{e}lene Fiaux", Name("H{e}lene", "H.", None, "Fiaux", None)),
            ("{\\relax Ch}ristoph Sommer", Name("{\\relax Ch}ristoph", "{\\relax Ch}.", None, "Sommer", None)),
        ],
    )
    def test_special_characters(self, parser, text, expected):
        assert parser.parse_segment(text) == expected

    def test_hyphen_in_family_name_given_first(self, parser):
        assert parser.parse_segment("Rodriguez Fernandez, José María") == Name(
            "José María", "J. M.", None, "Rodriguez Fernandez", None
        )
        assert parser.parse_segment("Rinnooy Kan, Alexander H. G.") == Name(
            "Alexander H. G.", "A. H. G.", None, "Rinnooy Kan", None
        )
        assert parser.parse_segment("Rinnooy Kan, Alexander Hendrik George") == Name(
            "Alexander Hendrik George", "A. H. G.", None, "Rinnooy Kan", None
        )
        assert parser.parse_segment("al-Ṭūlī, ʿAbdallāh") == Name("ʿAbdallāh", "ʿ.", None, "al-Ṭūlī", None)

    def test_prefix_within_family_name(self, parser):
        assert parser.parse_segment("Canon der Barbar, Alexander der Große") == Name(
            "Alexander der Große", "A. d. G.", None, "Canon der Barbar", None
        )

    def test_lower_case_word_only(self, parser):
        assert parser.parse_segment("John von") == Name("John", "J.", None, "von", None)

    def test_more_than_two_commas(self, parser):
        assert parser.parse_segment("Neumann, Jr, III, John") == Name("John", "J.", None, "Neumann", "Jr, III")

    def test_suffix_with_space(self, parser):
        assert parser.parse_segment("von Last, Jr. III, First") == Name("First", "F.", "von", "Last", "Jr. III")

    def test_leading_empty_comma_part(self, parser):
        assert parser.parse_segment(", John Smith") == Name("John", "J.", None, "Smith", None)

    def test_nothing(self, parser):
        assert parser.parse_segment("") is None
        assert parser.parse_segment(" , ") is None


class TestInstitutions:
    def test_institution(self, parser):
        names = parser.parse("{JabRef Developers} and Stefan Kolb")
        assert names == NameList.of(
            Name(None, None, None, "{JabRef Developers}", None),
            Name("Stefan", "S.", None, "Kolb", None),
        )
        assert names.get(0).kind is NameKind.INSTITUTION
        assert names.get(1).kind is NameKind.PERSON

    def test_and_inside_institution(self, parser):
        names = parser.parse("{JabRef Developers on Fire and Ice}")
        assert names.size() == 1
        assert names.get(0).family_name == "{JabRef Developers on Fire and Ice}"

    def test_leading_group_is_not_an_institution(self, parser):
        name = parser.parse_segment("{A}bbb{c}")
        assert name is not None
        assert not name.is_institution


class TestUpperCaseFamilyName:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("DOE, John", Name("John", "J.", None, "DOE", None)),
            ("WU, Jr, Jian", Name("Jian", "J.", None, "WU", "Jr")),
            ("Smith SH", Name("Smith", "S.", None, "SH", None)),
            ("John Smith III", Name("John Smith", "J. S.", None, "III", None)),
            ("Hans von ABC", Name("Hans", "H.", "von", "ABC", None)),
        ],
    )
    def test_family_name_stays_in_place(self, parser, text, expected):
        assert parser.parse_segment(text) == expected


class TestEmptyGroups:
    def test_empty_group_word(self, parser):
        names = parser.parse("{} Smith")
        assert names == NameList.of(Name(None, None, None, "Smith", None))
        assert names.get_as_first_last_names(False, False) == "Smith"
        assert names.get_as_first_last_names(True, False) == "Smith"

    def test_empty_group_before_comma(self, parser):
        name = parser.parse_segment("{}, John")
        assert name is not None
        assert name.family_name == "John"
        assert name.given_name is None

    @pytest.mark.parametrize("text", ["{}", "{ }", "{{}}"])
    def test_only_empty_groups(self, parser, text):
        assert parser.parse(text).is_empty()


class TestParse:
    def test_type_error(self, parser):
        with pytest.raises(TypeError):
            parser.parse(None)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            parser.parse(["John Smith"])  # type: ignore[arg-type]

    def test_odd_input(self, parser):
        assert parser.parse("").is_empty()
        assert parser.parse("and").is_empty()
        assert parser.parse("A {B and C").size() == 1
        assert parser.parse("}{").size() == 1

    def test_semicolons_off_by_default(self, parser):
        names = parser.parse("Smith, John; Doe, Jane")
        assert names.size() == 1
        assert names.get(0).name_suffix == "John; Doe"

    def test_semicolons(self):
        parser = AuthorListParser(ParserOptions(semicolon_separator=True))
        assert parser.parse("Smith, John; Doe, Jane") == NameList.of(
            Name("John", "J.", None, "Smith", None),
            Name("Jane", "J.", None, "Doe", None),
        )


class TestPrefixWords:
    def test_default(self, parser):
        assert parser.parse_segment("Ludwig Van Beethoven") == Name("Ludwig Van", "L. V.", None, "Beethoven", None)

    def test_configured(self):
        parser = AuthorListParser(ParserOptions(prefix_words=frozenset({"van"})))
        assert parser.parse_segment("Ludwig Van Beethoven") == Name("Ludwig", "L.", "Van", "Beethoven", None)
        assert parser.parse_segment("Van Beethoven, Ludwig") == Name("Ludwig", "L.", "Van", "Beethoven", None)

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("BIBNAMES_PREFIX_WORDS", "Van, De ,")
        parser = AuthorListParser()
        assert parser.options.prefix_words == frozenset({"van", "de"})
        assert parser.parse_segment("Jan De Bakker") == Name("Jan", "J.", "De", "Bakker", None)


class TestCommaSeparatedLists:
    @pytest.fixture
    def parser(self):
        return AuthorListParser(ParserOptions(comma_separated_lists=True))

    def test_family_given_pairs(self, parser):
        names = parser.parse("Ali Babar, M., Dingsøyr, T., Lago, P., van der Vliet, H.")
        assert names == NameList.of(
            Name("M.", "M.", None, "Ali Babar", None),
            Name("T.", "T.", None, "Dingsøyr", None),
            Name("P.", "P.", None, "Lago", None),
            Name("H.", "H.", "van der", "Vliet", None),
        )

    def test_complete_names(self, parser):
        names = parser.parse("Basil Dankworth, Gianna Birdwhistle, Cosmo Berrycloth")
        assert [name.family_name for name in names] == ["Dankworth", "Birdwhistle", "Berrycloth"]

    def test_affixes(self, parser):
        assert parser.parse("Smith, Jr, John") == NameList.of(Name("John", "J.", None, "Smith", "Jr"))
        names = parser.parse("von, Neumann, John, Smith, Jr., John")
        assert names == NameList.of(
            Name("John", "J.", "von", "Neumann", None),
            Name("John", "J.", None, "Smith", "Jr."),
        )

    def test_left_alone(self, parser):
        assert parser.parse("Smith, John").size() == 1
        assert parser.parse("Smith, John and Doe, Jane").size() == 2
        assert parser.parse("Smith, J., Doe").size() == 1

    def test_off_by_default(self):
        names = AuthorListParser(ParserOptions()).parse("Ali Babar, M., Dingsøyr, T.")
        assert names.size() == 1

    def test_affix_words(self):
        assert "jr" in DEFAULT_AFFIX_WORDS
        assert "der" in DEFAULT_AFFIX_WORDS
