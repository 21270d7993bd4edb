"""Tests for the PokerStars hand history parser."""

import codecs
import os
from decimal import Decimal

import pytest

from handparser.analysis.calculator import money_difference
from handparser.errors import InvalidHand
from handparser.models.action import ActionType, Street
from handparser.models.card import HoleCards
from handparser.parser.stars_parser import parse_file, parse_folder

FIXTURE_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


def fixture_path(*parts):
    return os.path.join(FIXTURE_DIR, *parts)


def _read(name):
    with open(fixture_path("hands", name)) as f:
        return f.read()


def _types(street):
    return [a.action_type for a in street.actions]


class TestMetaData:
    def test_site_name(self, load_hand):
        hand = load_hand("folded_preflop.txt")
        assert hand.meta_data.site == "PokerStars"

    def test_table_name(self, load_hand):
        hand = load_hand("folded_preflop.txt")
        assert hand.meta_data.table_name == "Aletta IV"

    def test_stake(self, load_hand):
        hand = load_hand("winning_all_in.txt")
        assert hand.meta_data.stake.small_blind == Decimal("0.10")
        assert hand.meta_data.stake.big_blind == Decimal("0.25")

    def test_zoom_header(self, parser):
        text = _read("folded_preflop.txt")
        text = text.replace("PokerStars Game #27853385493",
                            "PokerStars Zoom Hand #27853385493")
        hands = parser.parse_text(text)
        assert len(hands) == 1
        assert hands[0].meta_data.site == "PokerStars"


class TestPlayers:
    def test_players_in_seat_order(self, load_hand):
        hand = load_hand("showdown.txt")
        names = [p.name for p in hand.players]
        assert names == ["BaronMcCool", "speed1D", "Kolesia1970", "shpektorov"]

    def test_stacks(self, load_hand):
        hand = load_hand("folded_preflop.txt")
        stacks = {p.name: p.stack for p in hand.players}
        assert stacks == {
            "BaronMcCool": Decimal("10"),
            "shpektorov": Decimal("9.85"),
            "razy77razy": Decimal("10.40"),
        }

    def test_names_with_spaces(self, load_hand):
        hand = load_hand("table_chatter.txt")
        assert hand.has_player("I dinner41 I")

    def test_sitting_out_player_not_seated(self, load_hand):
        hand = load_hand("table_chatter.txt")
        assert not hand.has_player("kallekula")
        assert len(hand.players) == 3

    def test_every_action_by_a_seated_player(self, parser):
        hands = parse_folder(fixture_path("filter"))
        for hand in hands:
            for action in hand.actions:
                assert action.player in hand.players


class TestStreets:
    def test_folded_preflop_streets(self, load_hand):
        hand = load_hand("folded_preflop.txt")
        assert [s.street_type for s in hand.streets] == [
            Street.BLINDS, Street.PREFLOP, Street.SUMMARY,
        ]

    def test_full_hand_streets(self, load_hand):
        hand = load_hand("showdown.txt")
        assert [s.street_type for s in hand.streets] == [
            Street.BLINDS, Street.PREFLOP, Street.FLOP, Street.TURN,
            Street.RIVER, Street.SHOWDOWN, Street.SUMMARY,
        ]

    def test_empty_streets_dropped(self, load_hand):
        hand = load_hand("winning_all_in.txt")
        assert [s.street_type for s in hand.streets] == [
            Street.BLINDS, Street.PREFLOP, Street.SHOWDOWN, Street.SUMMARY,
        ]
        assert hand.street(Street.FLOP) is None

    def test_blinds(self, load_hand):
        hand = load_hand("folded_preflop.txt")
        blinds = hand.street(Street.BLINDS)
        assert [(a.player.name, a.action.amount) for a in blinds.actions] == [
            ("shpektorov", Decimal("0.05")),
            ("razy77razy", Decimal("0.10")),
        ]
        assert _types(blinds) == [ActionType.POSTS, ActionType.POSTS]

    def test_preflop_order(self, load_hand):
        hand = load_hand("folded_preflop.txt")
        assert _types(hand.street(Street.PREFLOP)) == [
            ActionType.FOLD,
            ActionType.FOLD,
            ActionType.COLLECT_UNCALLED,
            ActionType.COLLECT_FROM_POT,
            ActionType.DOESNT_SHOW,
        ]

    def test_raises(self, load_hand):
        hand = load_hand("raise_war.txt")
        raises = [a.action for a in hand.actions if a.action_type == ActionType.RAISE]
        assert [(r.amount, r.to_amount) for r in raises] == [
            (Decimal("0.20"), Decimal("0.30")),
            (Decimal("0.60"), Decimal("0.90")),
            (Decimal("0.90"), Decimal("1.80")),
        ]

    def test_all_in_raise(self, load_hand):
        hand = load_hand("winning_all_in.txt")
        action = hand.street(Street.PREFLOP).actions[2]
        assert action.player.name == "BaronMcCool"
        assert action.action.to_amount == Decimal("3.75")

    def test_flop_actions(self, load_hand):
        hand = load_hand("showdown.txt")
        flop = hand.street(Street.FLOP)
        assert _types(flop) == [
            ActionType.CHECK, ActionType.CHECK, ActionType.BET,
            ActionType.CALL, ActionType.CALL,
        ]
        assert flop.actions[2].action.amount == Decimal("0.20")

    def test_showdown(self, load_hand):
        hand = load_hand("showdown.txt")
        showdown = hand.street(Street.SHOWDOWN)
        assert _types(showdown) == [
            ActionType.SHOWS, ActionType.MUCKS, ActionType.SHOWS,
            ActionType.COLLECT_FROM_POT,
        ]
        assert showdown.actions[0].action.cards == HoleCards("Ts", "8s")

    def test_timed_out(self, load_hand):
        hand = load_hand("table_chatter.txt")
        timed_out = [a for a in hand.actions if a.action_type == ActionType.TIMED_OUT]
        assert len(timed_out) == 1
        assert timed_out[0].player.name == "I dinner41 I"

    def test_chatter_is_ignored(self, load_hand):
        hand = load_hand("table_chatter.txt")
        assert _types(hand.street(Street.FLOP)) == [
            ActionType.CHECK, ActionType.BET, ActionType.RAISE,
            ActionType.FOLD, ActionType.COLLECT_UNCALLED,
            ActionType.COLLECT_FROM_POT, ActionType.DOESNT_SHOW,
        ]


class TestSummary:
    def test_summary_outcomes(self, load_hand):
        hand = load_hand("showdown.txt")
        summary = hand.street(Street.SUMMARY)
        assert _types(summary) == [
            ActionType.FOLD,
            ActionType.SHOWED_AND_WON,
            ActionType.SHOWED_AND_LOST,
            ActionType.MUCKS_AND_SHOWS,
        ]

    def test_showed_and_won(self, load_hand):
        hand = load_hand("showdown.txt")
        won = hand.street(Street.SUMMARY).actions[1].action
        assert won.cards == HoleCards("Ks", "Qd")
        assert won.amount == Decimal("0.86")

    def test_collected(self, load_hand):
        hand = load_hand("raise_war.txt")
        collected = hand.street(Street.SUMMARY).actions[0]
        assert collected.player.name == "Wilderer"
        assert collected.action_type == ActionType.COLLECT_FROM_POT
        assert collected.action.amount == Decimal("1.85")

    def test_result(self, load_hand):
        hand = load_hand("showdown.txt")
        assert hand.result.pot == Decimal("0.90")
        assert hand.result.rake == Decimal("0.04")

    def test_zero_rake(self, load_hand):
        hand = load_hand("folded_preflop.txt")
        assert hand.result.rake == Decimal("0")

    def test_side_pot_result(self, parser):
        text = _read("winning_all_in.txt")
        text = text.replace("Total pot $7.60 | Rake $0.22",
                            "Total pot $7.60 Main pot $7.00. Side pot $0.60. | Rake $0.22")
        hands = parser.parse_text(text)
        assert hands[0].result.pot == Decimal("7.60")
        assert hands[0].result.rake == Decimal("0.22")


class TestInvalidHands:
    def test_unknown_action_dropped(self, parser):
        assert parser.parse_file(fixture_path("hands", "unknown_action.txt")) == []

    def test_unknown_action_raises(self, parser):
        lines = _read("unknown_action.txt").splitlines()
        with pytest.raises(InvalidHand):
            parser.parse_hand(lines)
        assert parser.try_parse_hand(lines) is None

    def test_siblings_survive(self, parser):
        hands = parser.parse_file(fixture_path("filter", "session_2.txt"))
        assert [h.meta_data.table_name for h in hands] == ["Aletta IV", "Bellatrix III"]

    def test_missing_pot_line(self, parser):
        lines = _read("folded_preflop.txt").splitlines()
        lines = [line for line in lines if not line.startswith("Total pot")]
        with pytest.raises(InvalidHand):
            parser.parse_hand(lines)

    def test_single_header_line(self, parser):
        with pytest.raises(InvalidHand):
            parser.parse_hand(["PokerStars Game #1: Hold'em No Limit ($0.05/$0.10 USD)"])

    def test_hero_not_seated(self, parser):
        lines = _read("raise_war.txt").splitlines()
        lines = [line.replace("Dealt to BaronMcCool", "Dealt to Nobody") for line in lines]
        with pytest.raises(InvalidHand, match="Nobody"):
            parser.parse_hand(lines)

    def test_unseated_player_action(self, parser):
        lines = _read("raise_war.txt").splitlines()
        lines.insert(10, "Stranger: calls $0.30")
        with pytest.raises(InvalidHand, match="Stranger"):
            parser.parse_hand(lines)

    def test_not_a_hand(self, parser):
        assert parser.parse_text("just some notes\nabout last night\n") == []


class TestFiles:
    def test_missing_file_raises(self, parser):
        with pytest.raises(FileNotFoundError):
            parser.parse_file(fixture_path("hands", "does_not_exist.txt"))

    def test_multiple_hands_in_file(self):
        hands = parse_file(fixture_path("filter", "session_1.txt"))
        assert len(hands) == 2
        assert all(h.meta_data.site == "PokerStars" for h in hands)

    def test_parse_is_repeatable(self, parser):
        path = fixture_path("hands", "showdown.txt")
        assert parser.parse_file(path) == parser.parse_file(path)

    def test_folder_order(self):
        hands = parse_folder(fixture_path("large_tree"))
        assert [h.players[0].name for h in hands] == [
            "BaronMcCool", "BaronMcCool", "Wilderer", "gorechin1986",
        ]

    def test_custom_glob(self, parser):
        parser.file_glob = "*.log"
        hands = parser.parse_folder(fixture_path("large_tree"))
        assert len(hands) == 1
        assert hands[0].has_player("drbull88")

    def test_byte_order_mark_stripped(self, parser, tmp_path):
        path = tmp_path / "bom.txt"
        path.write_bytes(codecs.BOM_UTF8 + _read("folded_preflop.txt").encode("utf-8"))
        hands = parser.parse_file(path)
        assert len(hands) == 1
        assert hands[0].meta_data.site == "PokerStars"


class TestPlayerNames:
    def test_board_prefixed_name_kept(self, parser):
        text = _read("raise_war.txt").replace("Wilderer", "Boardwalk")
        hand = parser.parse_text(text)[0]
        assert hand.has_player("Boardwalk")
        assert len(hand.actions_of("Boardwalk")) == len(
            parser.parse_text(_read("raise_war.txt"))[0].actions_of("Wilderer"))
        assert money_difference("Boardwalk", hand) == Decimal("1.05")
