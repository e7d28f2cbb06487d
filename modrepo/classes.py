"""Class names that are deliberately left out of extracted mod metadata."""

_FACTORY_GAME_CLASSES = (
    "FGColoredInstanceMeshProxy",
    "FGBuildableWall",
    "FGPowerConnectionComponent",
    "FGPipeConnectionFactory",
    "FGFactoryConnectionComponent",
    "FGPipeConnectionComponent",
    "FGProductionIndicatorInstanceComponent",
    "FGFactoryLegsComponent",
    "FGBuildableConveyorAttachment",
    "FGInteractWidget",
    "FGBuildableFoundation",
    "FGBuildableDecor",
    "FGNobeliskExplosive",
    "FGBuildableHologram",
    "FGRailroadTrackHologram",
    "FGReplicationDetailInventoryComponent",
    "FGCharacterAnimInstance",
    "FGConveyorMultiPoleHologram",
    "FGFoundationHologram",
    "FGBuildableWalkway",
    "FGWalkwayHologram",
    "FGWallHologram",
    "FGBuildableStair",
    "FGStairHologram",
    "FGRailroadVehicleHologram",
    "FGHologram",
    "FGBuildableRamp",
    "FGStartingPod",
    "FGAmbientSettings",
    "FGMusicManager",
    "FGMapAreaZoneDescriptor",
    "FGAISystem",
    "FGBuildableSubsystem",
    "FGChatManager",
    "FGCircuitSubsystem",
    "FGDamageType",
    "FGGameMode",
    "FGGameState",
    "FGGlobalSettings",
    "FGHUD",
    "FGHUDBase",
    "FGRadioactivitySubsystem",
    "FGRailroadSubsystem",
    "FGSignificanceManager",
    "FGStorySubsystem",
    "FGSubsystemClasses",
    "FGTimeOfDaySubsystem",
    "FGTutorialIntroManager",
    "FGTutorialSubsystem",
    "FGCrate",
    "FGItemPickedUpDependency",
    "FGSchematicPurchasedDependency",
    "FGEnvironmentSettings",
    "FGLadderComponent",
    "FGButtonWidget",
    "FGPowerCircuitWidget",
    "FGBuildEffectSpline",
    "FGMaterialEffect_Build",
    "FGConveyorAttachmentHologram",
    "FGConveyorBeltHologram",
    "FGPipelineHologram",
    "FGWallAttachmentHologram",
    "FGPipelineSupportHologram",
    "FGFAnimInstanceFactory",
    "FGProductionIndicatorComponent",
    "FGFactorySettings",
    "FGSignSettings",
    "FGAnimNotify_Attack",
    "FGAnimNotify_FootDown",
    "FGHeightHideUserData",
    "FGFoliageResourceUserData",
    "FGPlanet",
    "FGAttackRanged",
    "FGProjectile",
    "FGAttackMelee",
    "FGAnimPlayer",
    "FGAnimNotify_Landed",
    "FGMultiplayerVerticalBox",
    "FGInstancedSplineMeshComponent",
    "FGVehicleWheel",
    "FGHealthComponent",
    "FGCreatureController",
    "FGAttentionPingActor",
    "FGCheatManager",
    "FGPlayerController",
    "FGPlayerState",
    "FGProximitySubsystem",
    "FGRemoteCallObject",
    "FGCharacterPlayer",
    "FGCharacterMovementComponent",
    "FGOutlineComponent",
    "FGCameraModifierLimitLook",
    "FGMapArea",
    "FGMapAreaTexture",
    "FGMapObjectWidget",
    "FGPopupWidgetContent",
    "FGWindow",
    "FGWidgetSwitcher",
    "FGDynamicOptionsRow",
    "FGMessageBase",
    "FGMessageSender",
    "FGAudioMessage",
    "FGMinimapCaptureActor",
    "FGMapWidget",
    "FGUnlockMap",
    "FGUnlockSchematic",
    "FGUnlockSubsystem",
    "FGStingerWidgetRewardData",
    "FGCollectionParamUniformFloat",
    "FGHeightFoliageUserData",
    "FGSoundSplineComponent",
    "FGRiverSpline",
    "FGSporeFlower",
    "FGDotComponent",
    "FGSharedPostProcessSettings",
    "FGHeightWaterUserData",
    "FGGasPillar",
    "FGSkySphere",
    "FGFoliagePickup",
    "FGWaterAudio",
    "FGHardDriveSettings",
    "FGDropPodSettings",
    "FGDropPod",
    "FGCrashSiteDebrisActor",
    "FGCrashSiteDebris",
    "FGUnlockGiveItem",
    "FGUnlockBuildOverclock",
    "FGUnlockBuildEfficiency",
    "FGUnlockArmEquipmentSlot",
    "FGProfileSpline",
    "FGSchematicManager",
    "FGGamePhaseManager",
    "FGWildCardDescriptor",
    "FGOverflowDescriptor",
    "FGNoneDescriptor",
    "FGAnyUndefinedDescriptor",
    "FGResourceSettings",
    "FGItemPickup",
    "FGItemPickup_Spawnable",
    "FGResearchManager",
    "FGOptionsValueController",
    "FGWidgetMultiplayer",
    "FGMenuBase",
    "FGBaseUI",
    "FGTitleButton",
    "FGPopupWidget",
    "FGVehicleCollisionBoxComponent",
    "FGWheeledVehicleMovementComponent4W",
    "FGWheeledVehicleMovementComponent6W",
    "FGLocomotiveMovementComponent",
    "FGRailroadVehicleMovementComponent",
    "FGUseState",
    "FGEnvQueryGenerator_ForAngle",
    "FGManufacturingButton",
    "FGUnlockInventorySlot",
    "FGEditableText",
    "FGRenderTargetStage",
    "FGGameUI",
    "FGCompassObjectWidget",
    "FGCompassWidget",
    "FGInteractableMarker",
    "FGPipePartHologram",
    "FGToolBelt",
    "FGEquipmentStunSpear",
    "FGWeaponInstantFire",
    "FGPipeConnectionComponentHyper_C",
    "FGPipeConnectionComponentBase",
    "FGBuildablePipelineSupport",
    "FGWireHologram",
    "FGPlayerStartTradingPost",
    "FGTrainPlatformConnection",
    "FGTrainStationHologram",
    "FGRailroadVehicleSoundComponent",
    "FGRailRoadVehicleAnim",
    "FGEnvQueryTest_ItemDescription",
    "FGCreatureSeat",
    "FGCreatureSpawner",
    "FGEnemyController",
    "FGSplinePath",
    "FGCrabHatcher",
    "FGAttackMeleeJump",
    "FGManta",
    "FGFoliageIdentifier_Pickupable",
    "FGLootSettings",
    "FGCameraModifierSlide",
    "FGBeacon",
    "FGBuildGunAttachment",
    "FGBuildGun",
    "FGBuildGunStateBuild",
    "FGBuildGunStateDismantle",
    "FGBuildGunState",
    "FGWeaponAttachment",
    "FGC4Explosive",
    "FGDestructibleActor",
    "FGAnimInstanceTrainDocking",
    "FGRailroadTrackConnectionComponent",
    "FGAnimInstanceTruckStation",
    "FGPassengerSeat",
    "FGTargetPoint",
    "FGWheeledVehicle",
    "FGC4Dispenser",
    "FGChainsaw",
    "FGColorGun",
    "FGDecorationActor",
    "FGEquipmentDecoration",
    "FGDowsingStickAttachment",
    "FGDowsingStick",
    "FGGasMaskAttachment",
    "FGGasMask",
    "FGGolfCartDispenser",
    "FGResourceScanner",
    "FGResourceMiner",
    "FGWeaponProjectileFire",
    "FGWeaponAttachmentProjectile",
    "FGPortableMinerDispenser",
    "FGPortableMiner",
    "FGParachute",
    "FGObjectScanner",
    "FGObjectScannerAttachment",
    "FGWeaponChild",
    "FGNobeliskDetonator",
    "FGNobeliskExplosiveAttachment",
    "FGEquipmentChild",
    "FGJumpingStilts",
    "FGJumpingStiltsAttachment",
    "FGJetPack",
    "FGJetPackAttachment",
    "FGHookshot",
    "FGSuitBase",
    "FGSuitBaseAttachment",
    "FGNobeliskDetonatorAttachment",
    "FGResearchMachine",
    "FGPipelineFlowIndicatorComponent",
    "FGPowerInfoComponent",
)

_ENGINE_CLASSES = (
    "SizeBox",
    "SizeBoxSlot",
    "ScaleBoxSlot",
    "Overlay",
    "Image",
    "OverlaySlot",
    "WidgetBlueprintGeneratedClass",
    "ArrayProperty",
    "StructProperty",
    "TextBlock",
    "WidgetTree",
    "UserWidget",
    "ObjectProperty",
    "Function",
    "CanvasPanel",
    "CanvasPanelSlot",
    "Button",
    "ButtonSlot",
    "ByteProperty",
    "EnumProperty",
    "Texture2D",
    "SoundWave",
    "SoundNodeWavePlayer",
    "SoundCue",
    "SoundNodeMixer",
    "MaterialExpressionScalarParameter",
    "MaterialExpressionMaterialFunctionCall",
    "MaterialExpressionTextureSample",
    "Material",
    "MaterialInstanceConstant",
    "IntProperty",
    "SceneComponent",
    "HorizontalBoxSlot",
    "HorizontalBox",
    "TextProperty",
    "VerticalBoxSlot",
    "ScaleBox",
    "NamedSlot",
    "BoolProperty",
    "FloatProperty",
    "BorderSlot",
    "VerticalBox",
    "StrProperty",
    "Spacer",
    "Border",
    "ProgressBar",
    "RichTextBlock",
    "PanelSlot",
    "ScrollBox",
    "DelegateProperty",
    "BackgroundBlur",
    "UniformGridSlot",
    "BlueprintGeneratedClass",
    "StaticMesh",
    "NavCollision",
    "InheritableComponentHandler",
    "SimpleConstructionScript",
    "ComponentDelegateBinding",
    "SCS_Node",
    "SphereComponent",
    "StaticMeshComponent",
    "DistributionFloatConstant",
    "ParticleLODLevel",
    "ParticleSystem",
    "ParticleSpriteEmitter",
    "Font",
    "FontFace",
    "UniformGridPanel",
    "RetainerBox",
    "Slider",
    "BoxComponent",
    "SkeletalMeshComponent",
    "CableComponent",
    "ClassProperty",
    "MapProperty",
    "ScrollBoxSlot",
    "WidgetAnimation",
    "MovieScene",
    "MovieSceneFloatSection",
    "MovieSceneBuiltInEasingFunction",
    "MaterialExpressionVectorParameter",
    "AudioComponent",
    "ParticleSystemComponent",
    "DistributionVectorParticleParameter",
    "MulticastDelegateProperty",
    "AkAudioBank",
    "AkAudioEvent",
    "EditableTextBox",
    "MovieSceneFloatTrack",
    "DistributionFloatParticleParameter",
    "DistributionVectorConstant",
    "DistributionFloatConstantCurve",
    "CurveFloat",
    "DistributionVectorConstantCurve",
    "InstancedStaticMeshComponent",
    "DataTable",
    "CapsuleComponent",
    "StaticMeshSocket",
    "CheckBox",
    "WrapBox",
    "EditableText",
    "UserDefinedEnum",
    "SpotLightComponent",
    "PostProcessComponent",
    "Skeleton",
    "SkeletalMesh",
    "AnimSequence",
    "SkeletalBodySetup",
    "PhysicsAsset",
    "PhysicsConstraintTemplate",
    "Actor",
    "MaterialExpressionTextureObject",
    "SoundNodeConcatenator",
    "GridSlot",
    "GridPanel",
    "WidgetComponent",
    "InterfaceProperty",
    "BlueprintFunctionLibrary",
    "Object",
    "MaterialExpressionFontSampleParameter",
    "HierarchicalInstancedStaticMeshComponent",
    "MaterialExpressionTextureSampleParameter2D",
)

IGNORED_CLASSES: frozenset[str] = frozenset(_FACTORY_GAME_CLASSES + _ENGINE_CLASSES)


def is_ignored_class(name: str) -> bool:
    """Tell whether objects of class ``name`` are skipped during extraction."""
    return name in IGNORED_CLASSES