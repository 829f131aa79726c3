"""
Keyword classifier for inbound client messages.

Proposes a kanban stage for a WhatsApp message without calling a language model, then asks
validate_movement whether automation may act on it. Rules are checked in order and the first
match wins: neutral greetings, proposal requests, weak commercial intent, auto-replies,
clear rejections, indecision, partial rejections, then a generic default.

Matching is accent- and case-insensitive; keywords must appear as whole words.
"""

import logging
import re
import unicodedata
from typing import List, Literal, Optional, Sequence

from pydantic import BaseModel

from .movement import AUTOMATIC, CONTACT, LOST, PROPOSAL, validate_movement

logger = logging.getLogger(__name__)

Sentiment = Literal["positivo", "neutro", "negativo"]
Intent = Literal[
    "solicitacao_info",
    "aprovacao_envio",
    "resposta_automatica",
    "rejeicao_clara",
    "rejeicao_parcial",
    "indefinida",
]

NO_MOVE = ""


def normalize_message(text: str) -> str:
    """Lower-case and strip accents ("Olá" -> "ola")."""
    decomposed = unicodedata.normalize("NFD", (text or "").lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch)).strip()


def _normalized(words: Sequence[str]) -> List[str]:
    return list(dict.fromkeys(normalize_message(w) for w in words))


NEUTRAL_MESSAGES = _normalized([
    "oi", "ola", "olá", "eae", "e ae", "bom dia", "boa tarde", "boa noite",
    "kkk", "kk", "haha", "hehe", "rsrs", "teste", "test", "valeu", "valew",
    "obrigado", "obrigada", "thanks", "ok?", "tudo bem", "tudo bem?",
    "🙌", "🙏", "🙃", "😊", "✌", "...", "…",
    "entendi", "certo", "pode ser", "talvez", "estou avaliando",
    "deixa eu verificar", "vou analisar",
])

PROPOSAL_ACTIONS = _normalized([
    "ok", "okk", "okkk", "joia", "👍", "👌", "sim", "blz", "beleza", "manda",
    "pode mandar", "envia", "me manda", "envia aí", "manda aí",
])

CONTACT_INTENT = _normalized([
    "quero saber mais", "como funciona", "pode me explicar", "qual operadora é melhor",
    "me envia detalhes", "esse valor é bom", "quero entender melhor", "me chama",
    "pode falar", "quero conhecer mais", "como funciona esse serviço",
    "tem mais informações", "qual é o valor", "quanto custa", "quais condições",
    "quais prazos", "como posso iniciar", "tem taxa", "qual prazo de entrega",
    "qual o tempo de implementação", "me envia o contrato", "quase fechando",
    "só falta um detalhe", "estou analisando", "quase decidido", "quero validação final",
    "preciso confirmar uma coisa antes", "tem desconto", "é esse mesmo o preço",
    "quero falar com um consultor", "como faço o pagamento",
])

AUTO_REPLY_MARKERS = _normalized([
    "agradecem seu contato", "agradecemos seu contato", "obrigado pelo contato",
    "obrigado por entrar em contato", "como podemos ajudar", "como posso ajudar",
    "em que posso ajudar", "em que podemos ajudar", "podemos ajudá-lo",
    "sou assistente virtual", "sou um assistente", "atendimento automático",
    "bem-vindo ao", "bem vindo ao", "seja bem-vindo", "seja bem vindo",
    "deixe seu contato", "aguarde", "nosso suporte retornará", "estamos verificando",
    "fora do horário", "estamos fora", "não estamos disponíveis",
    "não estamos em atendimento", "retornaremos", "responderemos", "breve entraremos",
    "mensagem automática", "esta é uma resposta automática", "resposta automática",
    "horário de atendimento", "nosso horário", "em breve retornaremos",
    "em breve responderemos", "logo entraremos em contato", "entraremos em contato em breve",
    "equipe de atendimento", "nossa equipe entrará", "selecione uma opção",
    "digite o número", "para falar com", "menu de opções",
])

REJECTION_KEYWORDS = _normalized([
    "caro", "muito caro", "não quero", "não gostei", "não tenho interesse", "não!",
    "para de mandar mensagem", "não insista", "chato", "pare", "pare de chamar",
    "bloquear", "vou bloquear", "não me liga", "absurdo", "péssimo", "ruim",
    "insatisfeito", "não me interessa", "cancela tudo", "cancele tudo", "quero cancelar",
    "não tenho mais empresa", "empresa fechou", "eu cancelei o plano",
    "não tenho mais plano", "eu mudei de operadora", "pode encerrar",
    "não tenho mais a empresa", "pode cancelar", "favor cancelar", "ruim demais",
    "não faz sentido", "estou confuso", "não entendi", "não obrigado", "não preciso",
    "deixe pra lá", "muito ruim", "não gostei da proposta", "isso não serve pra mim",
    "retire meu número", "não entre mais em contato", "não tenho interesse nenhum",
    "está acima do orçamento", "preço alto", "não posso pagar isso agora", "achei caro",
    "não cabe no meu orçamento",
])

INDECISION_KEYWORDS = _normalized([
    "vou pensar", "deixa comigo", "depois te falo", "estou ocupado", "ocupado agora",
    "agora não posso", "não posso agora", "vamos ver depois", "depois a gente conversa",
    "não sei ainda", "tenho que pensar", "deixa eu avaliar", "preciso verificar",
    "preciso consultar", "quanto pago de multa", "qual é a multa", "se eu cancelar",
    "quanto custa cancelar", "não agora", "mais tarde", "depois falamos",
    "não tenho tempo agora", "manda depois", "estou correndo no momento", "agora não dá",
    "sem tempo", "muito corrido", "vejo isso depois", "podemos falar semana que vem",
    "não conheço", "não tenho segurança", "preciso pesquisar mais",
    "preciso ver depoimentos", "não sei se vale a pena", "não preciso disso",
    "já tenho solução", "não é prioridade", "não vejo necessidade agora", "vou ver",
    "agora não",
])

PARTIAL_REJECTION_KEYWORDS = _normalized([
    "cancelar algumas linhas", "algumas linhas", "não quero todas as linhas",
    "não vou renovar todas", "não vai renovar todas", "apenas algumas", "reduzir",
    "diminuir", "remover apenas", "quero só", "somente", "precisam cancelar algumas",
    "cancelar parcial", "mexer no plano", "ajustar o plano", "modificar as linhas",
])


class MessageAnalysis(BaseModel):
    """Classification of one inbound message and what the automation should do."""

    sentiment: Sentiment
    intent: Intent
    stage: str
    confidence: int
    reason: str
    should_act: bool
    should_create_new: bool
    partial_rejection: bool = False
    automatic_message: bool = False
    suggestion: str


def _phrase_pattern(phrase: str) -> re.Pattern:
    """Whole-word pattern for word-like phrases; plain containment for emoji/punctuation."""
    escaped = re.escape(phrase)
    prefix = r"(?<!\w)" if phrase[:1].isalnum() else ""
    suffix = r"(?!\w)" if phrase[-1:].isalnum() else ""
    return re.compile(prefix + escaped + suffix)


def _compile(phrases: Sequence[str]) -> List[re.Pattern]:
    return [_phrase_pattern(p) for p in phrases if p]


_PROPOSAL_PATTERNS = _compile(PROPOSAL_ACTIONS)
_CONTACT_PATTERNS = _compile(CONTACT_INTENT)
_AUTO_REPLY_PATTERNS = _compile(AUTO_REPLY_MARKERS)
_REJECTION_PATTERNS = _compile(REJECTION_KEYWORDS)
_INDECISION_PATTERNS = _compile(INDECISION_KEYWORDS)
_PARTIAL_PATTERNS = _compile(PARTIAL_REJECTION_KEYWORDS)


def _mentions(message: str, patterns: Sequence[re.Pattern]) -> bool:
    return any(p.search(message) for p in patterns)


def _moving(
    stage: str,
    current_stage: Optional[str],
    **fields,
) -> MessageAnalysis:
    """Analysis that proposes a stage; the movement rules decide the action flags."""
    decision = validate_movement(current_stage, stage)
    return MessageAnalysis(
        stage=stage,
        should_act=decision.allowed,
        should_create_new=decision.should_create_new,
        **fields,
    )


def _holding(**fields) -> MessageAnalysis:
    """Analysis that never moves the opportunity."""
    return MessageAnalysis(stage=NO_MOVE, should_act=False, should_create_new=False, **fields)


def classify_message(text: str, current_stage: Optional[str] = None) -> MessageAnalysis:
    """Classify an inbound message for an opportunity currently in current_stage."""
    msg = normalize_message(text)

    if msg in NEUTRAL_MESSAGES:
        logger.debug("[neutral] %r -> no move", text)
        return _holding(
            sentiment="neutro", intent="indefinida", confidence=100,
            reason="Mensagem completamente neutra/vazia", suggestion="Ignorar mensagem",
        )

    if _mentions(msg, _PROPOSAL_PATTERNS):
        logger.debug("[proposal] %r -> %s", text, PROPOSAL)
        return _moving(
            PROPOSAL, current_stage,
            sentiment="positivo", intent="aprovacao_envio", confidence=100,
            reason="Ação explícita para proposta", suggestion="Enviar proposta/simulador",
        )

    if _mentions(msg, _CONTACT_PATTERNS):
        logger.debug("[contact] %r -> %s", text, CONTACT)
        return _moving(
            CONTACT, current_stage,
            sentiment="positivo", intent="solicitacao_info", confidence=85,
            reason="Cliente pedindo informações", suggestion="Enviar informações/detalhes",
        )

    if _mentions(msg, _AUTO_REPLY_PATTERNS):
        logger.debug("[auto-reply] %r -> %s", text, AUTOMATIC)
        return _moving(
            AUTOMATIC, current_stage,
            sentiment="neutro", intent="resposta_automatica", confidence=100,
            reason="Resposta automática do sistema", suggestion="Aguardando retorno do sistema",
            automatic_message=True,
        )

    if _mentions(msg, _REJECTION_PATTERNS):
        logger.debug("[rejection] %r -> %s", text, LOST)
        return _moving(
            LOST, current_stage,
            sentiment="negativo", intent="rejeicao_clara", confidence=95,
            reason="Rejeição clara e definitiva", suggestion="Mover para PERDIDO",
        )

    if _mentions(msg, _INDECISION_PATTERNS):
        logger.debug("[indecision] %r -> no move", text)
        return _holding(
            sentiment="neutro", intent="indefinida", confidence=75,
            reason="Cliente indeciso ou ocupado - sem decisão clara",
            suggestion="Aguardar próxima mensagem do cliente",
        )

    if _mentions(msg, _PARTIAL_PATTERNS):
        logger.debug("[partial rejection] %r -> no move", text)
        return _holding(
            sentiment="neutro", intent="rejeicao_parcial", confidence=85,
            reason="Cliente quer ajustes parciais/cancelamento de algumas linhas - negócio ativo",
            suggestion="Alertar atendente - cliente quer ajustes, não é perda total",
            partial_rejection=True,
        )

    logger.debug("[default] %r -> %s", text, CONTACT)
    return _moving(
        CONTACT, current_stage,
        sentiment="neutro", intent="indefinida", confidence=50,
        reason="Mensagem genérica/inicial", suggestion="Engajar com cliente",
    )
