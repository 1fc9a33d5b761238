import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage, ToolMessage
from pydantic import ValidationError

from src.core.chat import ChatMessage, merge_status, to_langchain_messages
from src.core.chat.stream import data_part, error_part, finish_part, text_part


class TestChatMessage:
    def test_role_mapping(self):
        wire = [
            ChatMessage(role="system", content="s"),
            ChatMessage(role="user", content="u", id="1"),
            ChatMessage(role="assistant", content="a"),
            ChatMessage(role="tool", content="t", toolCallId="call-1"),
        ]
        converted = to_langchain_messages(wire)

        assert [type(m) for m in converted] == [SystemMessage, HumanMessage, AIMessage, ToolMessage]
        assert converted[1].id == "1"
        assert converted[3].tool_call_id == "call-1"

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError):
            ChatMessage(role="narrator", content="x")

    def test_structured_content_kept(self):
        blocks = [{"type": "text", "text": "hi"}]
        assert ChatMessage(role="user", content=blocks).to_langchain().content == blocks


class TestMergeStatus:
    def _messages(self):
        return [
            ChatMessage(id="1", role="user", content="find flights"),
            ChatMessage(id="2", role="assistant", content="searching"),
        ]

    def test_merges_last_entry_into_last_assistant(self):
        messages = self._messages()
        merged = merge_status(messages, [{"status": "thinking"}, {"status": "complete"}])

        assert merged[-1].status == {"status": "complete"}
        assert merged[0].status is None
        # display only: the input list is untouched
        assert messages[-1].status is None

    def test_no_data(self):
        messages = self._messages()
        assert merge_status(messages, None) == messages
        assert merge_status(messages, []) == messages

    def test_empty_last_entry(self):
        messages = self._messages()
        assert merge_status(messages, [{"status": "x"}, None])[-1].status is None

    def test_last_message_not_assistant(self):
        messages = self._messages() + [ChatMessage(id="3", role="user", content="thanks")]
        merged = merge_status(messages, [{"status": "complete"}])
        assert all(m.status is None for m in merged)

    def test_no_messages(self):
        assert merge_status([], [{"status": "complete"}]) == []


class TestStreamParts:
    def test_text_part(self):
        assert text_part('say "hi"\n') == '0:"say \\"hi\\"\\n"\n'

    def test_data_part(self):
        assert data_part({"status": "thinking"}) == '2:[{"status": "thinking"}]\n'

    def test_error_part(self):
        assert error_part("boom") == '3:"boom"\n'

    def test_finish_part(self):
        assert finish_part() == 'd:{"finishReason": "stop"}\n'
