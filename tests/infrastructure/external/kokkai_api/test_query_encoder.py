"""KokkaiQueryEncoder のユニットテスト."""

from urllib.parse import parse_qsl

import pytest

from src.application.dtos.search_parameters_dto import SearchParameters
from src.infrastructure.external.kokkai_api.query_encoder import KokkaiQueryEncoder


def _encode(**arguments: object) -> str:
    return KokkaiQueryEncoder.encode(SearchParameters.from_arguments(arguments))


class TestEncode:
    def test_japanese_scenario(self) -> None:
        query = _encode(nameOfHouse="衆議院", any="科学技術", maximumRecords=10)

        assert "nameOfHouse=%E8%A1%86%E8%AD%B0%E9%99%A2" in query
        assert "any=%E7%A7%91%E5%AD%A6%E6%8A%80%E8%A1%93" in query
        assert "maximumRecords=10" in query
        assert query.endswith("recordPacking=json")

    def test_empty_parameters_only_record_packing(self) -> None:
        assert KokkaiQueryEncoder.encode(SearchParameters()) == "recordPacking=json"

    @pytest.mark.parametrize(
        "key",
        ["from", "until", "speaker", "closing", "sessionFrom", "issueID"],
    )
    def test_absent_fields_are_omitted(self, key: str) -> None:
        query = _encode(nameOfHouse="参議院")

        assert f"{key}=" not in query

    def test_booleans_are_lowercase_literals(self) -> None:
        query = _encode(
            supplementAndAppendix=True, contentsAndIndex=False, closing=True
        )

        assert "supplementAndAppendix=true" in query
        assert "contentsAndIndex=false" in query
        assert "closing=true" in query

    def test_false_and_zero_are_present_values(self) -> None:
        query = _encode(closing=False, speechNumber=0)

        assert "closing=false" in query
        assert "speechNumber=0" in query

    def test_empty_strings_and_zero_paging_are_omitted(self) -> None:
        query = _encode(any="", speaker="", maximumRecords=0, startRecord=0)

        assert query == "recordPacking=json"

    @pytest.mark.parametrize(
        "key",
        ["nameOfHouse", "nameOfMeeting", "from", "until", "searchRange", "speechID"],
    )
    def test_empty_string_filter_is_omitted(self, key: str) -> None:
        query = _encode(**{key: "", "any": "予算"})

        assert f"{key}=" not in query
        assert "any=%E4%BA%88%E7%AE%97" in query

    def test_zero_range_values_are_present(self) -> None:
        query = _encode(sessionFrom=0, issueTo=0, supplementAndAppendix=False)

        assert "sessionFrom=0" in query
        assert "issueTo=0" in query
        assert "supplementAndAppendix=false" in query

    def test_integral_float_has_no_fraction(self) -> None:
        query = _encode(maximumRecords=10.0, startRecord=31)

        assert "maximumRecords=10&" in query
        assert "startRecord=31" in query

    def test_spaces_encoded_as_plus(self) -> None:
        query = _encode(speaker="岸田 石破", nameOfMeeting="本会議 予算委員会")

        assert "speaker=%E5%B2%B8%E7%94%B0+%E7%9F%B3%E7%A0%B4" in query
        assert "nameOfMeeting=%E6%9C%AC%E4%BC%9A%E8%AD%B0+" in query
        assert "%20" not in query

    def test_date_range_is_not_validated(self) -> None:
        query = _encode(**{"from": "2024-12-31", "until": "2024-01-01"})

        assert "from=2024-12-31" in query
        assert "until=2024-01-01" in query

    def test_record_packing_is_always_last(self) -> None:
        query = _encode(recordPacking="xml", nameOfHouse="両院", issueTo=3)

        assert query.split("&")[-1] == "recordPacking=xml"
        assert query.count("recordPacking=") == 1

    def test_explicit_record_packing_argument_wins(self) -> None:
        params = SearchParameters.from_arguments({"recordPacking": "xml"})

        query = KokkaiQueryEncoder.encode(params, record_packing="json")

        assert query == "recordPacking=json"

    def test_field_order_follows_parameter_map(self) -> None:
        query = _encode(issueTo=5, startRecord=1, any="予算", sessionFrom=210)

        keys = [key for key, _ in parse_qsl(query)]
        assert keys == ["startRecord", "any", "sessionFrom", "issueTo", "recordPacking"]

    def test_decoded_values_match_input(self) -> None:
        arguments = {
            "startRecord": 11,
            "maximumRecords": 50,
            "nameOfHouse": "衆議院",
            "speaker": "山田 太郎",
            "from": "2023-01-01",
            "closing": True,
            "speakerRole": "参考人",
            "sessionTo": 212,
        }

        decoded = dict(parse_qsl(_encode(**arguments)))

        assert decoded.pop("recordPacking") == "json"
        assert decoded == {
            "startRecord": "11",
            "maximumRecords": "50",
            "nameOfHouse": "衆議院",
            "speaker": "山田 太郎",
            "from": "2023-01-01",
            "closing": "true",
            "speakerRole": "参考人",
            "sessionTo": "212",
        }
