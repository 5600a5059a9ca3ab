"""Embedded list of common English words used as the default corpus."""

from core.corpus import Corpus

COMMON_WORDS = """
the be to of and a in that have it for not on with he as you do at this but
his by from they we say her she or an will my one all would there their what
so up out if about who get which go me when make can like time no just him
know take people into year your good some could them see other than then now
look only come its over think also back after use two how our work first well
way even new want because any these give day most us great between need large
often hand high place hold turn where help through much before line right too
mean old same tell boy follow came show around form three small set put end
does another home read must big such why ask went men change light kind off
play spell air away animal house point page letter mother answer found study
still learn should world near add food own below country plant last school
father keep tree never start city earth eye thought head under story saw left
few while along might close something seem next hard open example begin life
always those both paper together got group run important until children side
feet car mile night walk white sea began grow took river four carry state once
book hear stop without second later miss idea enough eat face watch far real
almost let above girl sometimes mountain cut young talk soon list song being
leave family body music color stand sun question fish area mark dog horse
bird problem complete room knew since ever piece told usually friend easy heard
order red door sure become top ship across today during short better best
however low hours black product happened whole measure remember early waves
reached listen wind rock space covered fast several toward five step morning
passed vowel true hundred against pattern table north slowly money map farm
pulled draw voice power town fine certain fly unit lead cry dark machine note
wait plan figure star box noun field rest correct able pound done beauty drive
stood contain front teach week final gave green quick develop ocean warm free
minute strong special mind behind clear tail produce fact street inch multiply
nothing course stay wheel full force blue object decide surface deep moon
island foot system busy test record boat common gold possible plane age dry
wonder laugh thousand ago ran check game shape yes hot brought heat snow tire
bring distant fill east paint language among
""".split()


def default_corpus() -> Corpus:
    """Return the embedded common word corpus."""
    return Corpus(COMMON_WORDS)
