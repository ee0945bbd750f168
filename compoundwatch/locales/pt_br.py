"""Brazilian Portuguese display text for the compound pattern catalog."""

from __future__ import annotations

from compoundwatch.patterns import Narrative, PatternTranslation

_PERSISTENCIA = (
    "Os tópicos constituintes persistem por dois ou mais ciclos de atualização consecutivos"
)

PT_BR_PATTERNS: dict[str, PatternTranslation] = {
    "trade-war-escalation": PatternTranslation(
        name="Escalada da Guerra Comercial",
        prediction="Espere volatilidade no mercado e ruptura nas cadeias de suprimento",
        narrative=Narrative(
            key_judgments=(
                "Medidas tarifárias estão sendo combinadas com atrito político bilateral",
                "O risco de retaliação cresce mais rápido que os sinais de negociação",
            ),
            indicators=(
                "Novas tabelas tarifárias ou ampliação das existentes",
                "Declarações oficiais EUA-China endurecendo o tom",
                "Aumento de relatos de atrasos em fretes e portos",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("Nenhum dos lados tem incentivo de curto prazo para recuar",),
            change_triggers=(
                "Anúncio de rodada de negociação ou pausa tarifária",
                "Ampliação das listas de exceção para bens críticos",
            ),
        ),
    ),
    "stagflation-risk": PatternTranslation(
        name="Risco de Estagflação",
        prediction="Ventos contrários na economia se somam - posicionamento defensivo recomendado",
        narrative=Narrative(
            key_judgments=(
                "A pressão de preços persiste enquanto a demanda por trabalho enfraquece",
                "O espaço para cortes de juros está diminuindo",
            ),
            indicators=(
                "Inflação acima das expectativas",
                "Anúncios de demissões se espalhando além de um único setor",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("O banco central continua priorizando a inflação sobre o crescimento",),
            change_triggers=("Duas leituras consecutivas de inflação mais fraca",),
        ),
    ),
    "geopolitical-crisis": PatternTranslation(
        name="Crise Geopolítica em Múltiplas Frentes",
        prediction="Várias zonas de conflito ativas - aversão a risco provável",
        narrative=Narrative(
            key_judgments=(
                "Vários teatros disputam atenção diplomática e militar",
                "A escalada em um teatro aumenta o risco de oportunismo em outro",
            ),
            indicators=(
                "Cobertura simultânea de duas ou mais zonas de conflito ativas",
                "Sessões diplomáticas de emergência convocadas",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("As grandes potências seguem relutantes em intervir diretamente",),
            change_triggers=("Cessar-fogo acordado em qualquer um dos teatros",),
        ),
    ),
    "tech-regulatory-storm": PatternTranslation(
        name="Tempestade Regulatória na Tecnologia",
        prediction="Ação regulatória coordenada pode afetar o setor de tecnologia",
        narrative=Narrative(
            key_judgments=(
                "Reguladores avançam em várias frentes tecnológicas ao mesmo tempo",
                "Os custos de conformidade das grandes plataformas devem subir",
            ),
            indicators=(
                "Novas regras de IA ou antitruste propostas",
                "Ações de fiscalização contra grandes plataformas",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("O consenso político pela regulação da tecnologia se mantém",),
            change_triggers=("Decisão judicial limitando a autoridade dos reguladores",),
        ),
    ),
    "financial-stress": PatternTranslation(
        name="Estresse no Setor Financeiro",
        prediction="Setor bancário sob pressão - monitorar de perto",
        narrative=Narrative(
            key_judgments=(
                "O nível dos juros expõe fragilidades nos balanços dos credores",
                "A exposição imobiliária amplia o risco de captação dos bancos",
            ),
            indicators=(
                "Relatos de saques de depósitos ou quebras bancárias",
                "Juros de hipoteca subindo enquanto os preços de imóveis cedem",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("As garantias de depósito não são ampliadas",),
            change_triggers=("Anúncio de linha emergencial de liquidez",),
        ),
    ),
    "nuclear-escalation": PatternTranslation(
        name="Escalada Nuclear",
        prediction="Retórica nuclear elevada - forte aversão a risco provável",
        narrative=Narrative(
            key_judgments=(
                "A sinalização nuclear aparece junto a conflitos ativos",
                "O risco de erro de cálculo está elevado",
            ),
            indicators=(
                "Referências oficiais à prontidão ou doutrina nuclear",
                "Relatos de enriquecimento ou testes de mísseis",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("A retórica permanece principalmente coercitiva e não operacional",),
            change_triggers=("Retomada de negociações de controle de armas ou inspeções",),
        ),
    ),
    "middle-east-escalation": PatternTranslation(
        name="Escalada no Oriente Médio",
        prediction="Risco de expansão do conflito regional",
        narrative=Narrative(
            key_judgments=(
                "O conflito em Gaza está atraindo atores estatais regionais",
                "Confrontos diretos entre Estados tornam-se mais prováveis",
            ),
            indicators=(
                "Ataques atribuídos a forças iranianas ou contra elas",
                "Restrições de navegação ou de espaço aéreo na região",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("As redes de aliados continuam respondendo a Teerã",),
            change_triggers=("Acordo de reféns ou de cessar-fogo concluído",),
        ),
    ),
    "energy-supply-shock": PatternTranslation(
        name="Choque de Oferta de Energia",
        prediction="Picos nos preços de energia e ruptura de oferta esperados",
        narrative=Narrative(
            key_judgments=(
                "Conflitos em regiões produtoras ameaçam os fluxos de energia",
                "Gargalos logísticos limitam a substituição",
            ),
            indicators=(
                "Interrupções em dutos, petroleiros ou refinarias",
                "Movimentos bruscos nos preços spot de energia",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("As reservas estratégicas não são liberadas em larga escala",),
            change_triggers=("Liberação coordenada de reservas pelos países consumidores",),
        ),
    ),
    "recession-signal": PatternTranslation(
        name="Sinal de Recessão",
        prediction="Indicadores clássicos de recessão se alinhando",
        narrative=Narrative(
            key_judgments=(
                "Emprego e habitação enfraquecem sob política restritiva",
                "A demanda do consumidor tende a desacelerar",
            ),
            indicators=(
                "Anúncios amplos de cortes de vagas",
                "Queda nas vendas de imóveis e na construção",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("O afrouxamento monetário chega tarde demais para compensar a desaceleração",),
            change_triggers=("Cortes de juros acompanhados de retomada das contratações",),
        ),
    ),
    "inflation-spiral": PatternTranslation(
        name="Espiral Inflacionária",
        prediction="Múltiplos vetores de inflação convergindo",
        narrative=Narrative(
            key_judgments=(
                "Choques de oferta e de clima alimentam juntos a pressão de preços",
                "As expectativas de inflação correm o risco de se desancorar",
            ),
            indicators=(
                "Alta nos custos de insumos e transporte",
                "Eventos climáticos atingindo regiões produtoras",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("Os choques não são compensados por demanda mais fraca",),
            change_triggers=("Alívio sustentado nos preços de frete e commodities",),
        ),
    ),
    "dollar-stress": PatternTranslation(
        name="Estresse do Dólar",
        prediction="Crescem as preocupações com instabilidade cambial",
        narrative=Narrative(
            key_judgments=(
                "Política monetária e geopolítica testam a confiança no dólar",
                "Reservas de valor alternativas atraem atenção",
            ),
            indicators=(
                "Grandes movimentos no índice do dólar ou na demanda por títulos do Tesouro",
                "Entradas em cripto ligadas a proteção cambial",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("Não há intervenção cambial coordenada",),
            change_triggers=("Declarações estabilizadoras dos principais bancos centrais",),
        ),
    ),
    "ai-disruption-wave": PatternTranslation(
        name="Onda de Disrupção por IA",
        prediction="Disrupção da força de trabalho impulsionada por IA se acelera",
        narrative=Narrative(
            key_judgments=(
                "A automação é citada diretamente em decisões sobre a força de trabalho",
                "A resposta regulatória está atrás da adoção",
            ),
            indicators=(
                "Demissões atribuídas a reestruturações por IA",
                "Grandes investimentos das plataformas em capacidade de IA",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("Os ganhos de produtividade chegam antes da requalificação em escala",),
            change_triggers=("Proteções trabalhistas vinculantes para o uso de IA",),
        ),
    ),
    "disinfo-storm": PatternTranslation(
        name="Tempestade de Desinformação",
        prediction="Preocupações com desinformação gerada por IA em alta",
        narrative=Narrative(
            key_judgments=(
                "Mídia sintética está sendo usada em torno de eventos eleitorais",
                "A capacidade de moderação das plataformas está sob pressão",
            ),
            indicators=(
                "Deepfakes virais de candidatos ou autoridades",
                "Orientações emergenciais de autoridades eleitorais",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("As ferramentas de detecção estão atrás das de geração",),
            change_triggers=("Rotulagem obrigatória de procedência aplicada",),
        ),
    ),
    "pandemic-redux": PatternTranslation(
        name="Retorno da Pandemia",
        prediction="Crise sanitária com efeitos na economia",
        narrative=Narrative(
            key_judgments=(
                "Uma emergência sanitária começa a afetar a atividade econômica",
                "Restrições de oferta podem voltar",
            ),
            indicators=(
                "Relatos de surtos com disseminação entre países",
                "Fechamento de fábricas ou portos por medidas sanitárias",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("Medidas de contenção são reintroduzidas",),
            change_triggers=("Tratamento ou contenção eficaz confirmados",),
        ),
    ),
    "climate-shock": PatternTranslation(
        name="Choque Climático",
        prediction="Eventos climáticos afetando a economia",
        narrative=Narrative(
            key_judgments=(
                "Eventos climáticos causam perturbação econômica mensurável",
                "Custos de seguro e reconstrução chegam aos preços",
            ),
            indicators=(
                "Grandes danos por incêndios, enchentes ou furacões",
                "Rotas de transporte fechadas pelo clima",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("Os gastos com adaptação não compensam as perdas de curto prazo",),
            change_triggers=("Fim da janela de risco sazonal sem novos eventos",),
        ),
    ),
    "social-pressure": PatternTranslation(
        name="Pressão Social",
        prediction="Estresse econômico combinado com focos de tensão política",
        narrative=Narrative(
            key_judgments=(
                "Insatisfações econômicas estão sendo canalizadas para campanhas políticas",
                "A imigração se torna um foco dessa frustração",
            ),
            indicators=(
                "Mensagens de campanha centradas no custo de vida",
                "Mudanças nas pesquisas ligadas à imigração",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("O calendário eleitoral mantém esses temas em evidência",),
            change_triggers=("Melhora significativa dos salários reais",),
        ),
    ),
    "cyber-warfare-escalation": PatternTranslation(
        name="Escalada da Guerra Cibernética",
        prediction="Operações cibernéticas patrocinadas por Estados se intensificam",
        narrative=Narrative(
            key_judgments=(
                "Operações cibernéticas estatais acompanham a tensão militar e diplomática",
                "Declarações de atribuição estão mais frequentes",
            ),
            indicators=(
                "Governos atribuindo invasões a atores estatais",
                "Alertas sobre campanhas contra setores críticos",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("As operações cibernéticas ficam abaixo do limiar de ataque armado",),
            change_triggers=("Acordo bilateral sobre normas cibernéticas",),
        ),
    ),
    "critical-infra-attack": PatternTranslation(
        name="Ataque a Infraestrutura Crítica",
        prediction="Aumenta a exposição de vulnerabilidades de infraestrutura",
        narrative=Narrative(
            key_judgments=(
                "Os ataques atingem infraestrutura operacional e não apenas dados",
                "Novos ativos de energia ampliam a superfície de ataque",
            ),
            indicators=(
                "Ransomware afetando concessionárias ou operadores logísticos",
                "Quedas de rede elétrica ou dutos ligadas a invasões",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("Os operadores têm pouca segmentação entre TI e TO",),
            change_triggers=("Notificação obrigatória de incidentes e prazos de proteção",),
        ),
    ),
    "cyber-financial-attack": PatternTranslation(
        name="Ataque Ciberfinanceiro",
        prediction="Vulnerabilidade cibernética do sistema financeiro detectada",
        narrative=Narrative(
            key_judgments=(
                "Incidentes cibernéticos coincidem com fragilidade financeira",
                "Choques de confiança podem se espalhar pelos mercados de captação",
            ),
            indicators=(
                "Invasões em bancos ou processadoras de pagamento",
                "Spreads de crédito abrindo após incidentes",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("Os incidentes não ficam contidos em uma única instituição",),
            change_triggers=("Reguladores confirmam contenção sistêmica",),
        ),
    ),
    "energy-weaponization": PatternTranslation(
        name="Energia como Arma",
        prediction="Energia usada como alavanca geopolítica - volatilidade de preços esperada",
        narrative=Narrative(
            key_judgments=(
                "Produtores usam decisões de oferta como alavanca política",
                "Sanções estão redesenhando as rotas do comércio de energia",
            ),
            indicators=(
                "Cortes de produção anunciados fora dos ciclos de mercado",
                "Novas sanções contra exportações de energia",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("Os compradores não têm alternativas de curto prazo",),
            change_triggers=("Aumento de produção acordado com países consumidores",),
        ),
    ),
    "resource-war": PatternTranslation(
        name="Guerra por Recursos",
        prediction="Oferta de minerais críticos sob pressão geopolítica",
        narrative=Narrative(
            key_judgments=(
                "Minerais críticos tornam-se instrumentos de competição entre Estados",
                "Os controles de exportação devem se ampliar",
            ),
            indicators=(
                "Restrições à exportação de terras raras ou tecnologia de processamento",
                "Programas de estoques estratégicos anunciados",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("A capacidade de processamento segue geograficamente concentrada",),
            change_triggers=("Nova oferta de fornecedores não alinhados entra em operação",),
        ),
    ),
    "green-transition-shock": PatternTranslation(
        name="Choque na Transição Verde",
        prediction="Gargalo se forma na cadeia de suprimentos da transição energética",
        narrative=Narrative(
            key_judgments=(
                "As metas de transição dependem de uma oferta mineral disputada",
                "Os cronogramas dos projetos correm risco de atraso",
            ),
            indicators=(
                "Picos de preço de lítio, cobalto ou insumos relacionados",
                "Projetos renováveis adiados por falta de componentes",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("Reciclagem e substituição continuam em pequena escala",),
            change_triggers=("Acordos bilaterais de fornecimento assinados",),
        ),
    ),
    "food-crisis-spiral": PatternTranslation(
        name="Espiral da Crise Alimentar",
        prediction="Ruptura no abastecimento de alimentos causada pelo clima se acelera",
        narrative=Narrative(
            key_judgments=(
                "Danos climáticos e falhas logísticas agravam a escassez de alimentos",
                "Regiões dependentes de importação são as mais expostas",
            ),
            indicators=(
                "Anúncios de quebra de safra ou proibição de exportação",
                "Índice de preços de alimentos subindo mês a mês",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("A ajuda alimentar emergencial não escala rapidamente",),
            change_triggers=("Previsões de safra forte nos principais exportadores",),
        ),
    ),
    "climate-migration": PatternTranslation(
        name="Pressão Migratória Climática",
        prediction="Deslocamentos climáticos provocando instabilidade social",
        narrative=Narrative(
            key_judgments=(
                "Desastres climáticos deslocam populações em grande escala",
                "Comunidades de acolhida mostram sinais de sobrecarga",
            ),
            indicators=(
                "Números de deslocados após eventos extremos",
                "Protestos nas regiões receptoras",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("O financiamento para reassentamento continua limitado",),
            change_triggers=("Grande pacote internacional de ajuda",),
        ),
    ),
    "agricultural-collapse": PatternTranslation(
        name="Sinal de Colapso Agrícola",
        prediction="Quebras de safra alimentando a inflação",
        narrative=Narrative(
            key_judgments=(
                "Seca e calor estão reduzindo a produção agrícola",
                "A inflação de alimentos deve vir em seguida",
            ),
            indicators=(
                "Revisões para baixo da colheita em regiões produtoras",
                "Problemas de custo ou disponibilidade de fertilizantes",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("Os estoques são pequenos demais para absorver a quebra",),
            change_triggers=("Retorno das chuvas sazonais ao normal",),
        ),
    ),
    "sovereign-debt-crisis": PatternTranslation(
        name="Crise da Dívida Soberana",
        prediction="Sustentabilidade da dívida pública em questão",
        narrative=Narrative(
            key_judgments=(
                "Juros mais altos elevam o custo de rolagem da dívida soberana",
                "Os mercados de crédito reprecificam o risco fiscal",
            ),
            indicators=(
                "Rebaixamentos de rating ou perspectivas negativas",
                "Rendimentos dos títulos subindo nos leilões",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("Nenhum ajuste fiscal é anunciado",),
            change_triggers=("Plano crível de redução do déficit",),
        ),
    ),
    "credit-contagion": PatternTranslation(
        name="Contágio de Crédito",
        prediction="Estresse de crédito se espalhando entre setores",
        narrative=Narrative(
            key_judgments=(
                "O estresse de crédito passa de tomadores isolados para credores",
                "O setor imobiliário é um canal provável de transmissão",
            ),
            indicators=(
                "Aumento de inadimplência em high yield e imóveis comerciais",
                "Credores endurecendo critérios",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("As perdas se concentram em balanços alavancados",),
            change_triggers=("Spreads de crédito se estreitam por várias semanas",),
        ),
    ),
    "dedollarization-signal": PatternTranslation(
        name="Sinal de Desdolarização",
        prediction="Sistemas de pagamento alternativos ganhando tração",
        narrative=Narrative(
            key_judgments=(
                "Estados sancionados e não alinhados constroem alternativas de pagamento",
                "Blocos comerciais formalizam liquidação fora do dólar",
            ),
            indicators=(
                "Cúpulas de blocos anunciando mecanismos de liquidação",
                "Negócios internacionais precificados fora do dólar",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("Os sistemas alternativos ganham liquidez suficiente para uso",),
            change_triggers=("Alívio de sanções para participantes importantes",),
        ),
    ),
    "social-tinderbox": PatternTranslation(
        name="Barril de Pólvora Social",
        prediction="Dificuldades econômicas alimentam risco de agitação civil",
        narrative=Narrative(
            key_judgments=(
                "A pressão do custo de vida se transforma em mobilização nas ruas",
                "As perdas de emprego ampliam a base dos protestos",
            ),
            indicators=(
                "Greves ou protestos citando preços ou salários",
                "Grandes anúncios de demissões nas regiões afetadas",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("As medidas de alívio do governo são insuficientes",),
            change_triggers=("Subsídios direcionados ou acordos salariais",),
        ),
    ),
    "democratic-stress": PatternTranslation(
        name="Estresse Democrático",
        prediction="Instituições políticas sob pressão",
        narrative=Narrative(
            key_judgments=(
                "Disputas eleitorais vêm acompanhadas de violência ou ameaças",
                "A confiança nas instituições está se deteriorando",
            ),
            indicators=(
                "Ataques ou complôs contra autoridades",
                "Protestos em massa contestando processos eleitorais",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("As forças de segurança permanecem politicamente neutras",),
            change_triggers=("Aceitação dos resultados por todos os partidos",),
        ),
    ),
    "global-protest-wave": PatternTranslation(
        name="Onda Global de Protestos",
        prediction="Protestos contra o custo de vida se espalhando",
        narrative=Narrative(
            key_judgments=(
                "Choques de alimentos e preços impulsionam protestos em vários países",
                "A agitação se espalha além das fronteiras",
            ),
            indicators=(
                "Protestos em vários países citando preços de alimentos",
                "Governos impondo controle de preços",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("A pressão de preços se mantém elevada durante a estação",),
            change_triggers=("Queda dos preços globais de alimentos",),
        ),
    ),
    "arms-race-acceleration": PatternTranslation(
        name="Aceleração da Corrida Armamentista",
        prediction="Gastos e aquisições militares em forte alta",
        narrative=Narrative(
            key_judgments=(
                "Membros da aliança se comprometem com aumentos sustentados em defesa",
                "As aquisições migram para produção de longo prazo",
            ),
            indicators=(
                "Aumentos de orçamento de defesa anunciados",
                "Grandes contratos plurianuais de armamentos",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("A guerra na Ucrânia continua ancorando a percepção de ameaça",),
            change_triggers=("Acordo negociado na Ucrânia",),
        ),
    ),
    "multi-domain-conflict": PatternTranslation(
        name="Conflito Multidomínio",
        prediction="Guerra se expandindo para os domínios cibernético, espacial e convencional",
        narrative=Narrative(
            key_judgments=(
                "A competição se expande ao mesmo tempo para o ciberespaço e o espaço",
                "Os caminhos de escalada entre domínios são mais difíceis de administrar",
            ),
            indicators=(
                "Testes antissatélite ou anúncios de forças espaciais",
                "Operações cibernéticas combinadas com reforço militar",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("Não há normas compartilhadas para operações espaciais e cibernéticas",),
            change_triggers=("Acordo sobre detritos espaciais ou limites a testes ASAT",),
        ),
    ),
    "escalation-ladder": PatternTranslation(
        name="Escada de Escalada",
        prediction="Intensidade dos conflitos subindo em vários teatros",
        narrative=Narrative(
            key_judgments=(
                "Reforço convencional e sinalização nuclear crescem juntos",
                "Várias rivalidades entre grandes potências escalam em paralelo",
            ),
            indicators=(
                "Retórica nuclear junto a entregas de armas",
                "Exercícios militares perto de fronteiras disputadas",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("A dissuasão se mantém, mas com margens menores",),
            change_triggers=("Canal de comunicação de crise entre líderes estabelecido",),
        ),
    ),
    "systemic-fragility": PatternTranslation(
        name="Fragilidade Sistêmica",
        prediction="Vários pontos de estresse do sistema convergindo - risco de falhas em cascata",
        narrative=Narrative(
            key_judgments=(
                "Pontos de estresse independentes estão coincidindo",
                "As reservas que absorvem choques isolados estão se esgotando",
            ),
            indicators=(
                "Pressão fiscal junto a interrupções de infraestrutura",
                "Incidentes climáticos e cibernéticos atingindo a logística",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("Os choques são correlacionados e não coincidentes",),
            change_triggers=("Dois ou mais pontos de estresse se resolvem",),
        ),
    ),
    "polycrisis": PatternTranslation(
        name="Policrise",
        prediction="Crises simultâneas se reforçando - monitorar todas as frentes",
        narrative=Narrative(
            key_judgments=(
                "Crises humanitárias, econômicas e climáticas se reforçam mutuamente",
                "A capacidade de resposta está sendo superada",
            ),
            indicators=(
                "Deslocamentos e insegurança alimentar nas mesmas regiões",
                "Agitação após choques climáticos ou de preços",
            ),
            confirmation_signals=(_PERSISTENCIA,),
            assumptions=("A coordenação internacional continua fragmentada",),
            change_triggers=("Resposta multilateral coordenada financiada",),
        ),
    ),
}
